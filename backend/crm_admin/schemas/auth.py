"""Auth Schemas — login, registration and profile payloads.

Invariants:
    - LoginCredentials: email (valid address) + password (>= 6 chars)
    - RegistrationRequest: LoginCredentials + name (>= 2 chars); field order email, password, name
    - CustomerRegistration: first/last name (>= 1 char) + login fields
    - ProfileUpdate: every field optional, explicit null rejected

Design Decisions:
    - RegistrationRequest subclasses LoginCredentials: email/password rules are inherited unchanged
"""

from pydantic import Field, StrictStr, field_validator

from crm_admin.schemas.base import Email, RequestSchema, reject_null

PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2


class LoginCredentials(RequestSchema):
    """Payload expected by POST /auth/login."""
    email: Email
    password: StrictStr = Field(min_length=PASSWORD_MIN_LENGTH)


class RegistrationRequest(LoginCredentials):
    """Payload expected by POST /auth/register."""
    name: StrictStr = Field(min_length=NAME_MIN_LENGTH)


class CustomerRegistration(RequestSchema):
    """Storefront customer self-registration."""
    first_name: StrictStr = Field(min_length=1)
    last_name: StrictStr = Field(min_length=1)
    email: Email
    password: StrictStr = Field(min_length=PASSWORD_MIN_LENGTH)

    @property
    def contact_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ProfileUpdate(RequestSchema):
    contact_name: StrictStr | None = Field(None, min_length=1)
    email: Email | None = None
    phone: StrictStr | None = None

    @field_validator("contact_name", "email", "phone", mode="before")
    @classmethod
    def no_explicit_null(cls, v: object) -> object:
        return reject_null(v)
