"""Product schemas."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductCreate(BaseModel):
    """Create a new product."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=255)
    raw_image_arr: list[Any] | None = Field(None, alias="rawImageArr")
    description: str | None = None
    price: Decimal


class ProductUpdate(ProductCreate):
    """Replace every mutable field of a product."""


class ProductResponse(BaseModel):
    """Product response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    raw_image_arr: list[Any] | None = Field(None, alias="rawImageArr")
    description: str | None
    price: Money
