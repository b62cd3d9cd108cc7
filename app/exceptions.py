from typing import Any, Mapping, Optional


class SmartCanteenError(Exception):
    """Base class for errors raised by services and surfaced by the API handlers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code, defaults to the class default_code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(SmartCanteenError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"
    default_message = "Invalid input"


class UnauthorizedError(SmartCanteenError):
    """Raised when the caller has no valid session."""

    http_status = 401
    default_code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class ForbiddenError(SmartCanteenError):
    """Raised when the caller's role does not grant access to the resource."""

    http_status = 403
    default_code = "FORBIDDEN"
    default_message = "Forbidden"


class NotFoundError(SmartCanteenError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"
    default_message = "Not found"


class ConflictError(SmartCanteenError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_code = "CONFLICT"
    default_message = "Conflict"


class DataAccessError(SmartCanteenError):
    """Raised when the data store could not complete a request.

    The initiating action is abandoned; callers may retry it.
    """

    http_status = 503
    default_code = "DATA_ACCESS_ERROR"
    default_message = "The data service is unavailable, please try again"
