"""Error Hierarchy — typed, categorized exceptions for CRM admin failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Invalid request payloads are NOT errors: validators return ValidationFailure data
    - InputValidationError is raised only when a caller explicitly unwraps a failure
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CrmAdminError base: one handler in the HTTP shell catches all
    - ErrorContext as dataclass: carries the failure timestamp into the envelope
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crm_admin.core.validation_result import ValidationFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class CrmAdminError(Exception):
    """Base exception for all CRM admin errors."""

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
            }
        }


class InputValidationError(CrmAdminError):
    """A validation failure was unwrapped as if it were a success."""

    def __init__(self, failure: ValidationFailure, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid request data: {', '.join(failure.fields)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.failure = failure

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [v.to_dict() for v in self.failure.violations]
        return response
