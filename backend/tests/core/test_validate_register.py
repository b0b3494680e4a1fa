"""Registration Validation — tests for validate_register_input.

Tests cover:
    - Valid payload normalizes to email, password, name
    - Name-only failure reports exactly one violation, for name
    - Login rules are inherited unchanged
    - All three fields invalid -> three violations in declaration order
"""

import pytest
from pydantic import ValidationError

from crm_admin.core.validate_input import validate_register_input
from crm_admin.schemas.auth import RegistrationRequest


def test_valid_registration_succeeds():
    result = validate_register_input({"email": "a@b.com", "password": "secret1", "name": "Jo"})
    assert result.ok
    assert isinstance(result.value, RegistrationRequest)
    assert result.data == {"email": "a@b.com", "password": "secret1", "name": "Jo"}


def test_one_char_name_reports_only_name():
    result = validate_register_input({"email": "a@b.com", "password": "secret1", "name": "J"})
    assert not result.ok
    assert len(result.violations) == 1
    assert result.violations[0].field == "name"


def test_missing_name_reports_only_name():
    result = validate_register_input({"email": "a@b.com", "password": "secret1"})
    assert result.fields == ["name"]


def test_login_rules_still_apply():
    result = validate_register_input({"email": "nope", "password": "secret1", "name": "Jo"})
    assert result.fields == ["email"]


def test_all_fields_invalid_reports_all_in_order():
    result = validate_register_input({"name": 5, "password": "", "email": "x"})
    assert result.fields == ["email", "password", "name"]


def test_extra_fields_are_dropped():
    result = validate_register_input({
        "email": "a@b.com", "password": "secret1", "name": "Jo", "role": "ADMIN",
    })
    assert set(result.data) == {"email", "password", "name"}


def test_revalidating_success_is_idempotent():
    first = validate_register_input({"email": "a@b.com", "password": "secret1", "name": "Jo"})
    assert validate_register_input(first.data) == first


def test_registration_value_is_frozen():
    result = validate_register_input({"email": "a@b.com", "password": "secret1", "name": "Jo"})
    with pytest.raises(ValidationError):
        result.value.name = "Changed"
