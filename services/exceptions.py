# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class CatalogConfigurationError(Exception):
    """
    Raised when a step catalog or a derived step sequence is malformed.

    This is a programming defect (unknown field, duplicated key, gaps in
    the numbering) and is never recovered from at runtime.
    """

    def __init__(self, message: str, catalog: str = None, step_key: str = None):
        super().__init__(message)
        self.message = message
        self.catalog = catalog
        self.step_key = step_key

    def __str__(self):
        if self.catalog:
            return f"[{self.catalog}] {self.message}"
        return self.message
