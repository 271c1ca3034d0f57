import logging
import traceback
from typing import Any, Dict
from functools import wraps
from flask import jsonify

logger = logging.getLogger(__name__)

class AppError(Exception):
    """Base application error class"""
    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(self.message)

class ValidationError(AppError):
    """Input validation errors; raised before anything reaches the store"""
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, "VALIDATION_ERROR", 400)

class DuplicateSlugError(AppError):
    """Slug already taken by another contact"""
    def __init__(self, message: str = "Slug already exists"):
        super().__init__(message, "DUPLICATE_SLUG", 409)

class NotFoundError(AppError):
    """No document matches the given identifier or slug"""
    def __init__(self, message: str = "Contact not found"):
        super().__init__(message, "NOT_FOUND", 404)

class PersistenceError(AppError):
    """Store-level failures (connection, unexpected document shape)"""
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, "PERSISTENCE_ERROR", 503)

def handle_errors(f):
    """Decorator for consistent error handling in API endpoints"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except AppError as e:
            logger.warning(f"Application error: {e.error_code} - {e.message}")
            body = format_error_response(e)
            return jsonify({"error": body["error"], "message": body["message"]}), body["status_code"]
        except Exception as e:
            logger.error(f"Unexpected error in {f.__name__}: {str(e)}")
            logger.error(traceback.format_exc())
            return jsonify({
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }), 500
    return decorated_function

def format_error_response(error: Exception) -> Dict[str, Any]:
    """Format error for API response"""
    if isinstance(error, AppError):
        return {
            "error": error.error_code,
            "message": error.message,
            "status_code": error.status_code
        }
    else:
        return {
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "status_code": 500
        }
