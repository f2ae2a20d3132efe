from .domain import (
    ApplicationError,
    ErrorCode,
    InvalidFieldError,
    ResourceNotFoundError,
    SessionIdGenerationError,
    SessionNotFoundError,
    UnrecognizedEventError,
    ValidationError,
)
from .handler import ErrorHandler, DefaultErrorHandler
from .http import application_error_response

__all__ = [
    "ApplicationError",
    "DefaultErrorHandler",
    "ErrorCode",
    "ErrorHandler",
    "InvalidFieldError",
    "ResourceNotFoundError",
    "SessionIdGenerationError",
    "SessionNotFoundError",
    "UnrecognizedEventError",
    "ValidationError",
    "application_error_response",
]
