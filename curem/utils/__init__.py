"""
Utility modules for curem.

This package contains:
- error_handler: Centralized error handling and custom exceptions
- validators: Input validation for contact records
- slug: Slug derivation and collision handling
- logging_utils: Logging configuration
"""

from .error_handler import (
    AppError,
    ValidationError,
    DuplicateSlugError,
    NotFoundError,
    PersistenceError,
    handle_errors,
    format_error_response
)

from .validators import InputValidator

__all__ = [
    'AppError',
    'ValidationError',
    'DuplicateSlugError',
    'NotFoundError',
    'PersistenceError',
    'handle_errors',
    'format_error_response',
    'InputValidator',
]
