# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class RemoteError(Exception):
    """Base class for failures talking to the remote store."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context


class ApiException(RemoteError):
    """Exception raised when the store answers with an error status."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message, context=context)
        self.status_code = status_code
        self.response_data = response_data or {}

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(RemoteError):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message, context=context)
        self.original_error = original_error


class ValidationException(Exception):
    """Exception raised for validation errors caught before any remote call."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context
