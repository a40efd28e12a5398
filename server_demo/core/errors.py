"""Error Hierarchy — typed, categorized exceptions for all server-demo failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client input errors are 400-level; serialization/startup errors are 500-level
    - str(error) is the raw message surfaced in X-REASON and QueryError.Reason

Design Decisions:
    - Single hierarchy with ServerDemoError base: one global handler catches all
      (ADR: uniform error shape)
    - EmptyParamsError message is the bare code "EMPTY_PARAMS": clients match on it
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class ServerDemoError(Exception):
    """Base exception for all server-demo errors."""

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

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500


# ─── Client Errors (400-level) ──────────────────────────────────

class EmptyParamsError(ServerDemoError):
    """Request carried no query parameters at all."""
    def __init__(self):
        super().__init__(
            "EMPTY_PARAMS", "EMPTY_PARAMS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class InvalidIdentifierError(ServerDemoError):
    """Text could not be parsed as a UUID."""
    def __init__(self, message: str):
        super().__init__(
            message, "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class SerializationError(ServerDemoError):
    """Response payload could not be encoded as JSON."""
    def __init__(self, message: str):
        super().__init__(
            message, "SERIALIZATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, 500,
        )


class IdentifierGenerationError(ServerDemoError):
    """Random identifier generation is unusable; raised at startup."""
    def __init__(self, message: str):
        super().__init__(
            f"identifier generation unavailable: {message}",
            "IDENTIFIER_GENERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
