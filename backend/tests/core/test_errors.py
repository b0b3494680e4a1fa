"""Error Hierarchy — tests for CrmAdminError envelope and subclasses."""

from crm_admin.core.errors import (
    CrmAdminError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InputValidationError,
)
from crm_admin.core.validation_result import ValidationFailure, Violation


def test_base_error_defaults_to_500():
    err = CrmAdminError("boom", "INTERNAL_ERROR", ErrorCategory.VALIDATION)
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.ERROR
    assert str(err) == "boom"


def test_to_response_shape():
    ctx = ErrorContext()
    err = CrmAdminError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        context=ctx, http_status=400,
    )
    error = err.to_response()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert error["severity"] == "error"
    assert error["timestamp"] == ctx.timestamp.isoformat()


def test_error_vocabulary_is_validation_only():
    assert [c.value for c in ErrorCategory] == ["validation"]
    assert [s.value for s in ErrorSeverity] == ["error"]


def test_input_validation_error_is_crm_admin_error():
    failure = ValidationFailure((Violation("name", "String should have at least 2 characters"),))
    err = InputValidationError(failure)
    assert isinstance(err, CrmAdminError)
    assert err.code == "VALIDATION_ERROR"
    assert err.category == ErrorCategory.VALIDATION
    assert err.message == "Invalid request data: name"
    assert err.to_response()["error"]["details"] == [failure.violations[0].to_dict()]
