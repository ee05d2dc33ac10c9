"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import TokenClaims
from src.services.auth import AuthService, verify_bearer
from src.services.catalog_service import CatalogService


def require_bearer(
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Gate a route behind a valid ``Authorization: Bearer <token>`` header."""
    return verify_bearer(authorization)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db)


def get_catalog_service(
    db: Annotated[Session, Depends(get_db)],
) -> CatalogService:
    """Get catalog service with dependencies."""
    return CatalogService(db)
