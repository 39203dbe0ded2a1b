"""Error Hierarchy: typed, categorized exceptions for dashboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Field validation failures are never raised; they travel as ValidationResult
    - Business-rule rejections are never raised; they travel as MutationOutcome
    - to_response() produces the REST error envelope

Design Decisions:
    - DatabaseError keeps the driver's cause separate from the envelope message,
      so mutations can append it to their user-facing failure text
    - AuthError carries a classified AuthErrorType; anything else coming out of
      an identity provider is unclassified and propagates untouched
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
    DATABASE = "database"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    record_id: str | None = None


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DashboardError):
    """Database operation failed. `cause` is the driver's own message."""
    def __init__(
        self, cause: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed: {cause}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.cause = cause
        self.operation = operation


# ─── Authentication Errors ──────────────────────────────────────

class AuthErrorType(str, Enum):
    """Classified identity-provider failures."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    ACCESS_DENIED = "AccessDenied"
    CONFIGURATION = "Configuration"


class AuthError(DashboardError):
    """Identity provider rejected or could not complete a sign-in."""
    def __init__(
        self,
        error_type: AuthErrorType,
        message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"Authentication failed ({error_type.value})",
            "AUTH_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.type = error_type
