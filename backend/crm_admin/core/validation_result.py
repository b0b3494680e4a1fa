"""Validation Result — tagged success/failure value returned by every validator.

Invariants:
    - A result is exactly one of ValidationSuccess (normalized value) or ValidationFailure
    - ValidationFailure holds >= 1 Violation, in the order the schema declares its fields
    - Results are frozen: safe to share across threads and requests
    - ValidationSuccess.data fed back into the same validator yields an equal success

Design Decisions:
    - Results over exceptions: callers branch on .ok, they cannot forget a failure path
    - unwrap() is the only place a failure turns into an exception (InputValidationError)
    - Violation.type keeps the schema library's machine code for diagnostics only;
      clients rely on field + message
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel

from crm_admin.core.errors import ErrorCategory, ErrorSeverity, InputValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_FIELD = "__root__"


@dataclass(frozen=True)
class Violation:
    """A single {field, message} record describing why a field failed validation."""
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


@dataclass(frozen=True)
class ValidationSuccess(Generic[ModelT]):
    """Payload satisfied its schema; value is the normalized model."""
    value: ModelT

    ok: ClassVar[bool] = True

    @property
    def data(self) -> dict:
        """JSON-safe normalized payload: wire (camelCase) names, unset optionals omitted."""
        return self.value.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def unwrap(self) -> ModelT:
        return self.value


@dataclass(frozen=True)
class ValidationFailure:
    """Payload violated its schema; violations lists every broken constraint."""
    violations: tuple[Violation, ...]

    ok: ClassVar[bool] = False
    http_status: ClassVar[int] = 400

    def __post_init__(self):
        if not self.violations:
            raise ValueError("ValidationFailure requires at least one violation")

    @property
    def fields(self) -> list[str]:
        """Violated field identifiers, in declaration order, without duplicates."""
        return list(dict.fromkeys(v.field for v in self.violations))

    def messages_for(self, field: str) -> list[str]:
        return [v.message for v in self.violations if v.field == field]

    def unwrap(self):
        raise InputValidationError(self)

    def to_response(self) -> dict:
        """Build the 4xx error envelope enumerating every violated field."""
        return {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": [v.to_dict() for v in self.violations],
            },
        }


ValidationResult = Union[ValidationSuccess[ModelT], ValidationFailure]
