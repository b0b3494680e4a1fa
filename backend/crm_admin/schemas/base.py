"""Schema Base — shared config and strict field types for request schemas.

Invariants:
    - RequestSchema instances are frozen (normalized values are never mutated downstream)
    - Email is a bare address: display-name forms ("Jo <a@b.com>") are rejected, never reduced
    - Email checks syntax only: no DNS, special-use domains (.test, .local) accepted
    - Email values are kept exactly as sent (no case folding)
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def check_email_syntax(value: str) -> str:
    """Reject anything that isn't a syntactically valid bare email address."""
    try:
        parsed = validate_email(
            value,
            check_deliverability=False,
            allow_display_name=False,
            test_environment=True,
            globally_deliverable=False,
        )
    except EmailNotValidError as e:
        raise _invalid_email(str(e)) from e
    # globally_deliverable=False also lifts the dotted-domain rule; keep it
    if "." not in parsed.ascii_domain:
        raise _invalid_email("The part after the @-sign is not valid. It should have a period.")
    return value


def _invalid_email(reason: str) -> PydanticCustomError:
    return PydanticCustomError(
        "value_error", "value is not a valid email address: {reason}", {"reason": reason},
    )


def reject_null(value: object) -> object:
    """Optional fields may be omitted but not sent as null."""
    if value is None:
        raise PydanticCustomError("string_type", "Input should be a valid string")
    return value


Email = Annotated[StrictStr, AfterValidator(check_email_syntax)]


class RequestSchema(BaseModel):
    """Base for every request payload schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )
