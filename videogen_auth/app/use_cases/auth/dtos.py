"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from videogen_auth.domain.entities import Platform, User

PLATFORMS = {platform.value for platform in Platform}


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    name: str
    email: str
    password: str


# ============================================================================
# Nested Models
# ============================================================================


class UserView(BaseModel):
    """Externally visible projection of a user; never carries secrets"""

    id: str
    name: str
    email: str
    plan: str
    is_admin: bool
    is_email_verified: bool
    connected_platforms: List[str]
    videos_generated: int
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            plan=user.plan_name,
            is_admin=user.is_admin,
            is_email_verified=user.is_email_verified,
            connected_platforms=sorted(
                {p for p in user.connected_platforms or [] if p in PLATFORMS}
            ),
            videos_generated=user.videos_generated or 0,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Response for use cases that only report an outcome"""

    message: str


class RegisterResponse(BaseModel):
    """Response for registration use case"""

    message: str
    temp_user_id: str


class AuthResponse(BaseModel):
    """Response for use cases that authenticate the user"""

    user: UserView
    access_token: str
    refresh_token: str


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
