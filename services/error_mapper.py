# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException, translate=tr) -> str:
    """Map API exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
        return translate("error.save.invalid_data")

    if status in (401, 403):
        logger.warning(f"API authorization error ({status}): {error}")
        return translate("error.save.unauthorized")

    if status:
        logger.warning(f"API error ({status}): {error}")
    return translate("error.save.failed")


def map_network_error(error: NetworkException, translate=tr) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return translate("error.api.timeout")
    return translate("error.api.connection")


def map_exception(error: Exception, context: str = None, translate=tr) -> str:
    """Map any exception raised by a collaborator to a user-facing message.

    Args:
        error: The exception to map
        context: Operation context recorded on API errors
        translate: Translator for the message key (defaults to the global one)
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error, translate)

    if isinstance(error, NetworkException):
        return map_network_error(error, translate)

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return translate("error.save.failed")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("error", "")
