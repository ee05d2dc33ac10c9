"""Order schemas."""

from pydantic import BaseModel, ConfigDict

from src.schemas.product import Money


class OrderCreate(BaseModel):
    """Place an order. Quantity is checked by the service, price is never accepted."""

    quantity: int | None = None


class OrderResponse(BaseModel):
    """Order response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: int
    total_price: Money
