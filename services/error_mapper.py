# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# Message shown per call site when the store fails, keyed by context
_CONTEXT_MESSAGES = {
    "exam.load": "error.exam.load_failed",
    "exam.create": "error.exam.create_failed",
    "course.load": "error.course.load_failed",
    "course.create": "error.course.create_failed",
    "extraction": "error.extraction_failed",
}


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-facing message.

    Technical details are logged only.
    """
    if error.status_code == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif error.status_code:
        logger.warning(f"API error ({error.status_code}): {error}")

    key = _CONTEXT_MESSAGES.get(error.context or "")
    return tr(key) if key else tr("error.api.rejected")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to a user-facing message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-facing message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message

    logger.warning(f"Unexpected error: {error}")
    return tr("error.unexpected")


def _extract_validation_details(response_data: dict) -> str:
    """Extract PostgREST error details from a response body."""
    if not response_data:
        return ""

    parts = []
    for key in ("message", "details", "hint"):
        value = response_data.get(key)
        if value:
            parts.append(f"{key}: {value}")

    errors = response_data.get("errors")
    if isinstance(errors, list):
        parts.extend(str(e) for e in errors)

    return " | ".join(parts)
