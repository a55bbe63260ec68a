# -*- coding: utf-8 -*-
"""
Field Visits Data Models
"""

from .form_record import FormRecord, FormType, RecordStatus, SaveKind

__all__ = [
    "FormRecord",
    "FormType",
    "RecordStatus",
    "SaveKind",
]
