"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import AuthResponse, Token, UserCredentials, UserResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    credentials: UserCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    token, user = auth_service.register(credentials.username, credentials.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=Token)
def login(
    credentials: UserCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with username and password."""
    token = auth_service.authenticate(credentials.username, credentials.password)
    return Token(token=token)
