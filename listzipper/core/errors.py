"""Error Hierarchy — typed, categorized exceptions for the shell's failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Cursor boundaries are never errors: the core reports them as NOT_Z / PartialMove
    - to_response() produces the REST envelope; no internal details in user-facing messages

Design Decisions:
    - Single hierarchy with ListZipperError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    LIMIT = "limit"
    IO = "io"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    op: str | None = None
    step: int | None = None
    path: str | None = None
    user_message: str | None = None


class ListZipperError(Exception):
    """Base exception for all listzipper shell errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "op": self.context.op,
                    "step": self.context.step,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnknownOperationError(ListZipperError):
    """Script step names an operation that does not exist."""
    def __init__(self, op: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown cursor operation '{op}'",
            "UNKNOWN_OPERATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.op = op


class InvalidStepError(ListZipperError):
    """Script step is missing the argument its operation needs."""
    def __init__(self, op: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid step for '{op}': {reason}",
            "INVALID_STEP", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.op = op
        self.reason = reason


class InputTooLargeError(ListZipperError):
    """Request exceeds a configured size limit."""
    def __init__(
        self, field_name: str, size: int, limit: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"'{field_name}' has {size} entries, limit is {limit}",
            "INPUT_TOO_LARGE", ErrorCategory.LIMIT,
            ErrorSeverity.WARNING, context, 413,
        )
        self.field_name = field_name
        self.size = size
        self.limit = limit


# ─── Infrastructure Errors (500-level) ──────────────────────────

class FileBatchError(ListZipperError):
    """A manifest or a file it names could not be read."""
    def __init__(self, path: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"Cannot read '{path}': {reason}",
            "FILE_READ_ERROR", ErrorCategory.IO,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.path = path
