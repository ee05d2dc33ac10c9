"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, Token, TokenClaims, UserCredentials, UserResponse
from src.schemas.order import OrderCreate, OrderResponse
from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    "UserCredentials",
    "Token",
    "AuthResponse",
    "TokenClaims",
    "UserResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "OrderCreate",
    "OrderResponse",
]
