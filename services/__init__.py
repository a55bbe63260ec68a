# -*- coding: utf-8 -*-
"""
Field Visits Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "VisitApiService",
    "TranslationManager",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "VisitApiService":
        from .visit_api_service import VisitApiService
        return VisitApiService
    elif name == "TranslationManager":
        from .translation_manager import TranslationManager
        return TranslationManager
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
