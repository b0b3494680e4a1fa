"""Pricing Schemas — bulk pricing tiers for product variants.

Invariants:
    - min_quantity is an int >= 1 ("Minimum quantity must be at least 1")
    - price is a finite number >= 0 ("Price cannot be negative")
    - bool is neither an int nor a float here
"""

from pydantic import Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from crm_admin.schemas.base import RequestSchema, reject_null


class BulkPricingTier(RequestSchema):
    id: StrictStr | None = None
    min_quantity: StrictInt
    price: StrictFloat = Field(allow_inf_nan=False)

    @field_validator("id", mode="before")
    @classmethod
    def no_explicit_null(cls, v: object) -> object:
        return reject_null(v)

    @field_validator("min_quantity")
    @classmethod
    def check_min_quantity(cls, v: int) -> int:
        if v < 1:
            raise PydanticCustomError(
                "greater_than_equal", "Minimum quantity must be at least 1", {"ge": 1},
            )
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v: float) -> float:
        if v < 0:
            raise PydanticCustomError(
                "greater_than_equal", "Price cannot be negative", {"ge": 0},
            )
        return v


class BulkPricingUpdate(RequestSchema):
    """Full replacement of a variant's pricing tiers."""
    tiers: list[BulkPricingTier]
