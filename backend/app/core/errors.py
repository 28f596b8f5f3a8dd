"""Error Hierarchy — typed, categorized exceptions for every portfolio failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError (400) always names the offending field(s)
    - NotFoundError (404) never carries internal detail
    - StorageUnavailableError (503) keeps its detail server-side; to_response() is generic
    - to_response() produces the flat {message, ...} body declared in the contract registry

Design Decisions:
    - Single hierarchy with PortfolioError base: one FastAPI handler catches all
    - ValidationError collects every failing field, not just the first
"""

from dataclasses import dataclass
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass(frozen=True)
class FieldError:
    """One violated field and a human-readable reason."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class PortfolioError(Exception):
    """Base exception for all portfolio errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(PortfolioError):
    """Client-supplied input violates an entity schema."""

    def __init__(self, errors: list[FieldError]):
        if not errors:
            raise ValueError("ValidationError requires at least one FieldError")
        super().__init__(
            errors[0].message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = list(errors)

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def to_response(self) -> dict:
        return {
            "message": self.message,
            "field": self.field,
            "errors": [e.to_dict() for e in self.errors],
        }


class NotFoundError(PortfolioError):
    """Requested entity does not exist."""

    def __init__(self, resource_type: str, resource_id: object = None):
        super().__init__(
            f"{resource_type} not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageUnavailableError(PortfolioError):
    """Persistence layer unreachable or a query failed for infrastructural reasons."""

    def __init__(self, detail: str, operation: str):
        super().__init__(
            f"Storage {operation} failed: {detail}",
            "STORAGE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.detail = detail
        self.operation = operation

    def to_response(self) -> dict:
        return {"message": "Service temporarily unavailable"}
