# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    FieldRule,
    RequiredText,
    RequiredNumber,
    OptionalField,
    LoadBreakdown,
    RequiredObject,
    ConditionalObject,
    RequiredList,
)

__all__ = [
    'FieldRule',
    'RequiredText',
    'RequiredNumber',
    'OptionalField',
    'LoadBreakdown',
    'RequiredObject',
    'ConditionalObject',
    'RequiredList',
]
