from typing import Any, Mapping, Optional


class DinnerMatchError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (e.g. the id of a conflicting row)
        code: machine-readable error code used in the API error envelope
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "Error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(DinnerMatchError):
    """Raised when an identifier or payload is malformed or out of range (400)."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NotFoundError(DinnerMatchError):
    """Raised when a referenced member, meal, plan or day does not exist (404)."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ConflictError(DinnerMatchError):
    """Raised when a uniqueness rule would be violated, e.g. a second plan for one week (409).

    ``details`` carries the id of the existing row so callers can redirect to it.
    """

    http_status = 409
    default_code = "CONFLICT"

    def __init__(self, message: str = "Conflict", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class InvalidStateError(DinnerMatchError):
    """Raised when the plan's status does not allow the operation, e.g. voting outside 'voting' (400)."""

    http_status = 400
    default_code = "INVALID_STATE"

    def __init__(self, message: str = "Operation not allowed in current state", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)
