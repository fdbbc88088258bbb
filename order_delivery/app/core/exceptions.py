"""
Custom exceptions for consistent error reporting.

Provides standardized error codes and a payload formatter used when
failures are logged.
"""

from typing import Any, Dict, Iterable


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class InvalidStageNameError(AppException, ValueError):
    """Raised when a delivery stage is looked up by a name that does not exist."""

    def __init__(self, name: str, valid: Iterable[str] = ()):
        super().__init__(
            message=f"No delivery stage named {name!r}",
            error_code="ERR_LOOKUP_001",
            details={"name": name, "valid": list(valid)}
        )


class UnknownDeliveryStateError(AppException, TypeError):
    """Raised when a value outside the closed set of delivery states is rendered."""

    def __init__(self, value: Any):
        type_name = type(value).__name__
        super().__init__(
            message=f"{type_name} is not an order delivery state",
            error_code="ERR_STATE_001",
            details={"type": type_name}
        )


class InvalidDeliveryStateError(AppException, ValueError):
    """Raised when a raw payload cannot be parsed into a delivery state."""

    def __init__(self, errors: list):
        super().__init__(
            message="Invalid delivery state payload",
            error_code="ERR_STATE_002",
            details={"errors": errors}
        )


def error_payload(exc: Exception) -> Dict[str, Any]:
    """Build the standard error body for an exception."""
    if isinstance(exc, AppException):
        return {
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }

    return {
        "error_code": "ERR_INTERNAL",
        "message": f"{type(exc).__name__}: {exc}",
        "details": {}
    }
