"""Customer Schemas — business verification payloads.

Invariants:
    - BusinessDetails: company/phone/business type/tax id non-empty; address fields present
    - VerificationStatusUpdate.status is one of CustomerStatus
"""

from enum import Enum

from pydantic import Field, StrictStr

from crm_admin.schemas.base import RequestSchema


class CustomerStatus(str, Enum):
    """Business verification states."""
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"


class Address(RequestSchema):
    street: StrictStr
    city: StrictStr
    state: StrictStr
    zip_code: StrictStr
    country: StrictStr


class BusinessDetails(RequestSchema):
    """Business profile submitted for verification."""
    company_name: StrictStr = Field(min_length=1)
    phone: StrictStr = Field(min_length=1)
    business_type: StrictStr = Field(min_length=1)
    tax_id: StrictStr = Field(min_length=1)
    address: Address


class VerificationStatusUpdate(RequestSchema):
    status: CustomerStatus
