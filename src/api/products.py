"""Product API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_catalog_service, require_bearer
from src.schemas.auth import TokenClaims
from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from src.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
def get_products(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get all products."""
    return catalog.list_products()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    _claims: Annotated[TokenClaims, Depends(require_bearer)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Create a new product."""
    return catalog.create_product(product_data)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Get a product by id."""
    return catalog.get_product(product_id)


@router.patch("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    _claims: Annotated[TokenClaims, Depends(require_bearer)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Replace a product's name, images, description and price."""
    return catalog.update_product(product_id, product_data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    _claims: Annotated[TokenClaims, Depends(require_bearer)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Delete a product. Deleting an unknown id still succeeds."""
    catalog.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
