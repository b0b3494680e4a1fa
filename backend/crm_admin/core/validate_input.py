"""Input Validation — turns untrusted request bodies into normalized values or violations.

Invariants:
    - Never raises for malformed input: every outcome is a ValidationResult
    - Every field is checked; violations come back together, in schema declaration order
    - Nested fields are reported as dotted paths ("address.city", "tiers.0.price")
    - A non-mapping payload yields exactly one violation, for ROOT_FIELD
    - Unknown fields are dropped from the normalized value
    - Pure: only side effect is one DEBUG log record per rejected payload (field names only)

Design Decisions:
    - One engine (validate_payload) + thin named entry points per request type
    - Schema library errors converted at this seam: nothing above core/ sees pydantic errors
    - Model instances are re-validated from their dump so subclasses can't smuggle extra fields
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ValidationError

from crm_admin.core.validation_result import (
    ROOT_FIELD,
    ModelT,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    Violation,
)
from crm_admin.schemas.auth import (
    CustomerRegistration,
    LoginCredentials,
    ProfileUpdate,
    RegistrationRequest,
)
from crm_admin.schemas.customer import BusinessDetails, VerificationStatusUpdate
from crm_admin.schemas.pricing import BulkPricingTier, BulkPricingUpdate
from crm_admin.schemas.product import ProductVariant

logger = logging.getLogger(__name__)


def validate_payload(schema: type[ModelT], data: object) -> ValidationResult[ModelT]:
    """Validate data against schema. Returns success with the model or failure with all violations."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, exclude_unset=True)
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        failure = ValidationFailure(tuple(
            _to_violation(e)
            for e in exc.errors(include_url=False, include_input=False)
        ))
        logger.debug(
            f"Rejected {schema.__name__} payload",
            extra={
                "schema": schema.__name__,
                "violation_count": len(failure.violations),
                "fields": failure.fields,
            },
        )
        return failure
    return ValidationSuccess(value)


def field_path(loc: Sequence[str | int]) -> str:
    """("tiers", 0, "price") -> "tiers.0.price"; empty location -> ROOT_FIELD."""
    return ".".join(str(part) for part in loc) or ROOT_FIELD


def _to_violation(error: dict) -> Violation:
    return Violation(
        field=field_path(error["loc"]),
        message=error["msg"],
        type=error["type"],
    )


# --- Auth ---------------------------------------------------------------------

def validate_login_input(data: object) -> ValidationResult[LoginCredentials]:
    """email (valid address) + password (>= 6 chars)."""
    return validate_payload(LoginCredentials, data)


def validate_register_input(data: object) -> ValidationResult[RegistrationRequest]:
    """Login rules plus name (>= 2 chars)."""
    return validate_payload(RegistrationRequest, data)


def validate_customer_register_input(data: object) -> ValidationResult[CustomerRegistration]:
    return validate_payload(CustomerRegistration, data)


def validate_profile_update_input(data: object) -> ValidationResult[ProfileUpdate]:
    return validate_payload(ProfileUpdate, data)


# --- Customers ----------------------------------------------------------------

def validate_business_details_input(data: object) -> ValidationResult[BusinessDetails]:
    return validate_payload(BusinessDetails, data)


def validate_verification_status_input(
    data: object,
) -> ValidationResult[VerificationStatusUpdate]:
    return validate_payload(VerificationStatusUpdate, data)


# --- Pricing ------------------------------------------------------------------

def validate_bulk_pricing_tier_input(data: object) -> ValidationResult[BulkPricingTier]:
    return validate_payload(BulkPricingTier, data)


def validate_bulk_pricing_input(data: object) -> ValidationResult[BulkPricingUpdate]:
    return validate_payload(BulkPricingUpdate, data)


# --- Products -----------------------------------------------------------------

def validate_product_variant_input(data: object) -> ValidationResult[ProductVariant]:
    """sku, positive price, non-negative stock, str -> str attributes."""
    return validate_payload(ProductVariant, data)
