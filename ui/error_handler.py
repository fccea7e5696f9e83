# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QWidget

from services.error_mapper import map_exception
from services.exceptions import ValidationException
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions to toast notifications. Never blocks, never re-raises."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, notify: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally notify the user.

        Args:
            error: The exception to handle
            parent: Widget whose window shows the toast
            context: Context for error mapping (e.g. "exam.load")
            notify: Whether to show a toast

        Returns:
            User-facing message string
        """
        if isinstance(error, ValidationException):
            logger.info(f"Validation failed in {context or error.context or 'unknown'}: {error.message}")
            toast_type = Toast.WARNING
        else:
            logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=error)
            toast_type = Toast.ERROR

        message = map_exception(error, context)

        if notify and parent is not None:
            Toast.notify(parent, message, toast_type)

        return message

    @staticmethod
    def show_success(parent: QWidget, message: str):
        Toast.notify(parent, message, Toast.SUCCESS)
