"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    """Signup or login request."""

    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """Public user identity. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class Token(BaseModel):
    """Login response."""

    token: str


class AuthResponse(BaseModel):
    """Signup response with token and user info."""

    token: str
    user: UserResponse


class TokenClaims(BaseModel):
    """Identity decoded from a verified bearer token."""

    username: str
    user_id: int
