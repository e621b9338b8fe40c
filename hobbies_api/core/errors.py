"""Error Hierarchy — typed, categorized exceptions for all Hobbies API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the REST envelope {success: false, error, message?}
    - No internal details leaked in user-facing messages (causes travel via __cause__)

Design Decisions:
    - Single hierarchy with HobbyApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never sent to clients."""
    hobby_id: str | None = None
    operation: str | None = None


class HobbyApiError(Exception):
    """Base exception for all Hobbies API errors."""

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
        """Convert to the standard response envelope."""
        return {"success": False, "error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class HobbyValidationError(HobbyApiError):
    """One or more field rules failed; all violations reported together."""
    def __init__(self, violations: list[str], context: ErrorContext | None = None):
        super().__init__(
            ", ".join(violations), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations


class InvalidHobbyIdError(HobbyApiError):
    """Path id is not a non-negative integer."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.hobby_id = raw_id
        super().__init__(
            "Invalid hobby ID", "INVALID_HOBBY_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class HobbyNotFoundError(HobbyApiError):
    """Requested hobby does not exist."""
    def __init__(self, hobby_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.hobby_id = str(hobby_id)
        super().__init__(
            "Hobby not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )


class HobbyConflictError(HobbyApiError):
    """Write rejected because another hobby already has the name."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Hobby with this name already exists", "HOBBY_NAME_CONFLICT",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 409,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class HobbyOperationError(HobbyApiError):
    """Storage call failed unexpectedly. Message is fixed per operation."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
