from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standardized error codes used across the application."""

    # Authorization
    FORBIDDEN = "AUTH_002"

    # Resource Errors
    RESOURCE_NOT_FOUND = "RES_001"

    # Validation Errors
    INVALID_INPUT = "VAL_001"
    INVALID_FORMAT = "VAL_003"

    # System Errors
    INTERNAL_ERROR = "SYS_001"
    SERVICE_UNAVAILABLE = "SYS_002"


class ApplicationError(Exception):
    """Base application exception that captures rich error context."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details: Dict[str, Any] = details or {}

    def as_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
        }


class ResourceNotFoundError(ApplicationError):
    def __init__(self, resource_type: str, resource_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        message = f"{resource_type} with ID '{resource_id}' not found"
        enriched_details = {"resource_type": resource_type, "resource_id": resource_id}
        if details:
            enriched_details.update(details)
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, 404, enriched_details)


class ValidationError(ApplicationError):
    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        details_dict: Dict[str, Any] = details.copy() if details else {}
        if field:
            details_dict.setdefault("field", field)
        super().__init__(message, ErrorCode.INVALID_INPUT, 400, details_dict)


class SessionNotFoundError(ApplicationError):
    """The session id is unknown or has already been retired.

    Surfaced as 403 rather than 404: a missing session means the page is
    stale or the id was forged, so the request is not allowed.
    """

    def __init__(self, session_id: Optional[str], details: Optional[Dict[str, Any]] = None) -> None:
        enriched_details: Dict[str, Any] = {"session_id": session_id}
        if details:
            enriched_details.update(details)
        super().__init__("Session not found or expired", ErrorCode.FORBIDDEN, 403, enriched_details)


class SessionIdGenerationError(ApplicationError):
    def __init__(self, message: str = "Failed to generate session id", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, ErrorCode.SERVICE_UNAVAILABLE, 500, details)


class InvalidFieldError(ValidationError):
    def __init__(self, form_id: Optional[str], details: Optional[Dict[str, Any]] = None) -> None:
        details_dict: Dict[str, Any] = details.copy() if details else {}
        details_dict.setdefault("form_id", form_id)
        super().__init__(f"Unrecognized form control '{form_id}'", field="formId", details=details_dict)


class UnrecognizedEventError(ApplicationError):
    def __init__(self, event_type: Optional[str], details: Optional[Dict[str, Any]] = None) -> None:
        enriched_details: Dict[str, Any] = {"event_type": event_type}
        if details:
            enriched_details.update(details)
        super().__init__(f"Unrecognized event type '{event_type}'", ErrorCode.INVALID_FORMAT, 400, enriched_details)
