"""Error Hierarchy: typed, categorized exceptions for every intake failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and conflict errors (400) are recoverable by the caller;
      storage errors (500) are not and render an opaque body
    - to_response() produces the exact REST body the form client expects
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeIntakeError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Duplicate key is its own class, raised by the storage adapter: the service
      never inspects driver error codes
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


DUPLICATE_ENTRY_MESSAGE = "Duplicate entry detected. Check EmployeeId or Email."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass(frozen=True)
class FieldViolation:
    """One field that failed one rule."""
    field: str
    code: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "code": self.code, "message": self.message}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    operation: str | None = None


class EmployeeIntakeError(Exception):
    """Base exception for all intake errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "employee_id": self.context.employee_id,
            "operation": self.context.operation,
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class EmployeeValidationError(EmployeeIntakeError):
    """Input failed one or more field rules."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        fields = sorted({v.field for v in violations})
        super().__init__(
            f"Invalid employee data: {', '.join(fields)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errors": [v.to_dict() for v in self.violations]}

    def log_extra(self) -> dict:
        extra = super().log_extra()
        extra["violation_count"] = len(self.violations)
        return extra


class DuplicateEmployeeError(EmployeeIntakeError):
    """Insert rejected by a uniqueness constraint (employeeId or email)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            DUPLICATE_ENTRY_MESSAGE,
            "DUPLICATE_ENTRY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(EmployeeIntakeError):
    """Database operation failed for a reason the caller cannot fix."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": INTERNAL_ERROR_MESSAGE}
