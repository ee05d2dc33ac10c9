"""SQLAlchemy models."""

from src.models.order import Order
from src.models.product import Product
from src.models.user import User

__all__ = [
    "User",
    "Product",
    "Order",
]
