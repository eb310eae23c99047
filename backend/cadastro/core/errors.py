"""Error Hierarchy — typed, categorized exceptions for all Cadastro failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) log as warnings; storage errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message, "code": code}
    - No SQL or driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CadastroError base: FastAPI global handler catches all
    - Severity drives the handler's log level, category travels as a log field
"""

from enum import Enum

from cadastro.core.domain_types import Locale, UserValidationFailure
from cadastro.core.error_messages import DEFAULT_LOCALE, get_validation_message


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


class CadastroError(Exception):
    """Base exception for all Cadastro errors."""

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
        """Convert to standardized REST error response."""
        return {"error": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(CadastroError):
    """Registration payload broke one of the field rules."""
    def __init__(
        self,
        failure: UserValidationFailure,
        locale: Locale = DEFAULT_LOCALE,
    ):
        super().__init__(
            get_validation_message(failure, locale),
            failure.value, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.failure = failure
        self.locale = locale


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(CadastroError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
