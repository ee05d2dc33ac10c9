"""Order API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_catalog_service
from src.schemas.order import OrderCreate, OrderResponse
from src.services.catalog_service import CatalogService

# Shares the /products prefix; registered before the products router so
# /products/orders is not captured by /products/{product_id}.
router = APIRouter(prefix="/products", tags=["orders"])


@router.get("/orders", response_model=list[OrderResponse])
def get_orders(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get all orders."""
    return catalog.list_orders()


@router.post(
    "/{product_id}/order",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
def place_order(
    product_id: int,
    order_data: OrderCreate,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Order a product. The total is computed from the stored price."""
    return catalog.place_order(product_id, order_data.quantity)
