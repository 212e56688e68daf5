"""Error Hierarchy — typed, categorized exceptions for all school records failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before or instead of a write; store
      failures are DatabaseError (500, or 503 from the health check) and critical
    - to_response() produces the REST envelope {success: false, error: {...}}
    - No store internals leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SchoolAdminError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries entity/record for logs without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    record_id: str | None = None


class SchoolAdminError(Exception):
    """Base exception for all school administration errors."""

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
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(SchoolAdminError):
    """Identifier is not in the expected key format."""
    def __init__(self, entity: str, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(entity=entity, record_id=raw_id)
        super().__init__(
            f"Invalid {entity.lower()} ID",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.raw_id = raw_id


class RecordValidationError(SchoolAdminError):
    """Input record failed field-level validation."""
    def __init__(
        self, violations: list[dict], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.violations
        return response


class ResourceNotFoundError(SchoolAdminError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type, record_id=resource_id)
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_id = resource_id


class DuplicateKeyError(SchoolAdminError):
    """A unique field value is already taken by another record."""
    def __init__(
        self, label: str, field_name: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{label} already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.field = field_name


class CourseFullError(SchoolAdminError):
    """Enrollment would exceed the course's maxStudents."""
    def __init__(self, max_students: int, context: ErrorContext | None = None):
        super().__init__(
            f"Course is full ({max_students}/{max_students} students)",
            "COURSE_FULL", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.max_students = max_students


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SchoolAdminError):
    """Database operation failed.

    500 on record routes; the health check raises it with 503.
    """
    def __init__(
        self, message: str, operation: str,
        context: ErrorContext | None = None, http_status: int = 500,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.operation = operation
