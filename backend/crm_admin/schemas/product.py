"""Product Schemas — product variant payloads for the admin catalogue.

Invariants:
    - sku non-empty ("SKU is required")
    - price a finite number > 0 ("Price must be positive")
    - stock an int >= 0 ("Stock must be non-negative")
    - attributes maps str -> str; a bad value is reported as "attributes.<key>"
    - image_url optional, never null
"""

from pydantic import Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from crm_admin.schemas.base import RequestSchema, reject_null


class ProductVariant(RequestSchema):
    """Variant created or updated from the product admin page."""
    sku: StrictStr
    price: StrictFloat = Field(allow_inf_nan=False)
    stock: StrictInt
    attributes: dict[StrictStr, StrictStr]
    image_url: StrictStr | None = None

    @field_validator("sku")
    @classmethod
    def check_sku(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("string_too_short", "SKU is required", {"min_length": 1})
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v: float) -> float:
        if v <= 0:
            raise PydanticCustomError("greater_than", "Price must be positive", {"gt": 0})
        return v

    @field_validator("stock")
    @classmethod
    def check_stock(cls, v: int) -> int:
        if v < 0:
            raise PydanticCustomError(
                "greater_than_equal", "Stock must be non-negative", {"ge": 0},
            )
        return v

    @field_validator("image_url", mode="before")
    @classmethod
    def no_explicit_null(cls, v: object) -> object:
        return reject_null(v)
