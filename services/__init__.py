# -*- coding: utf-8 -*-
"""
Question Extractor Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ExtractionService",
    "QuestionBankApiClient",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ExtractionService":
        from .extraction_service import ExtractionService
        return ExtractionService
    elif name == "QuestionBankApiClient":
        from .api_client import QuestionBankApiClient
        return QuestionBankApiClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
