# -*- coding: utf-8 -*-
"""
Field Visits Controllers
========================
Controller layer shared by the wizards.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates

Usage:
    from controllers import OperationResult

    result = service.submit_record(payload, "DRAFT")
    if result.success:
        print(f"Saved: {result.data}")
    else:
        print(f"Error: {result.message}")
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

__all__ = [
    "BaseController",
    "OperationResult",
]
