"""
Error types for content validation and lookup.
Messages identify the field and the violated constraint, never the value
beyond what the caller already sent.
"""
from enum import Enum
from typing import Optional


class ContentErrorCode(str, Enum):
    """Error codes surfaced in API error responses."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    NOT_FOUND = "NOT_FOUND"


class ContentError(Exception):
    """
    Base exception for content errors.

    Attributes:
        error_code: Code returned in the error response
        status_code: HTTP status code to return
        message: Human-readable message
    """

    def __init__(
        self,
        error_code: ContentErrorCode,
        message: str,
        status_code: int = 500
    ):
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ContentError):
    """Raised when a user-supplied field is malformed or out of constraint."""

    def __init__(self, reason: str, field: Optional[str] = None):
        self.field = field
        self.reason = reason
        message = f"{field}: {reason}" if field else reason
        super().__init__(
            error_code=ContentErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400
        )


class BannerValidationError(ValidationError):
    """Raised by the banner request middleware; wraps a ValidationError."""

    PREFIX = "Banner validation error"

    def __init__(self, cause: ValidationError):
        super().__init__(reason=cause.reason, field=cause.field)
        self.message = f"{self.PREFIX}: {cause.message}"
        self.args = (self.message,)


class SchemaError(ContentError):
    """Raised when a stored record does not have the expected shape."""

    def __init__(self, reason: str):
        super().__init__(
            error_code=ContentErrorCode.SCHEMA_ERROR,
            message=reason,
            status_code=500
        )


class NotFoundError(ContentError):
    """Raised when a requested record does not exist."""

    def __init__(self, resource: str = "record"):
        super().__init__(
            error_code=ContentErrorCode.NOT_FOUND,
            message=f"{resource} not found",
            status_code=404
        )
