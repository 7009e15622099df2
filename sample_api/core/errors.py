"""Error Hierarchy — typed, categorized exceptions for every sample-endpoint failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are WARNING; server errors (500-level) are CRITICAL
    - to_response() produces the flat {"error": message} envelope clients expect
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SampleApiError base: one global handler renders all
    - Fixed messages live on the subclasses, not at raise sites
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    SIMULATED = "simulated"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class SampleApiError(Exception):
    """Base exception for all sample API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidRequestBodyError(SampleApiError):
    """Request body is not a JSON object."""
    def __init__(self, reason: str | None = None):
        super().__init__(
            "Invalid request body", "INVALID_REQUEST_BODY",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.reason = reason


class SimulatedBadRequestError(SampleApiError):
    """Raised on purpose by the error sample endpoint."""
    def __init__(self):
        super().__init__(
            "This is a bad request error", "SIMULATED_BAD_REQUEST",
            ErrorCategory.SIMULATED, ErrorSeverity.WARNING, 400,
        )


class UnauthorizedError(SampleApiError):
    """Authorization header missing or not the expected bearer token."""
    def __init__(self):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, 401,
        )


class HandlerTimeoutError(SampleApiError):
    """Guarded handler did not finish before its deadline."""
    def __init__(self, timeout_seconds: float, route: str | None = None):
        super().__init__(
            "Request Timeout", "REQUEST_TIMEOUT",
            ErrorCategory.TIMEOUT, ErrorSeverity.WARNING, 408,
        )
        self.timeout_seconds = timeout_seconds
        self.route = route


# ─── Server Errors (500-level) ──────────────────────────────────

class PayloadStreamError(SampleApiError):
    """Reading a response payload from its source failed."""
    def __init__(self, reason: str):
        super().__init__(
            "Internal Server Error", "PAYLOAD_STREAM_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
        self.reason = reason
