"""Schemas related to signing in and keeping a session alive."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from .envelope import CamelModel

UserRole = Literal["super_admin", "admin", "editor", "viewer"]


class AdminUser(CamelModel):
    """A staff account allowed into the admin console."""

    id: int
    email: str
    name: str
    role: UserRole
    avatar: Optional[str] = None
    phone: Optional[str] = None
    last_login: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TokenPair(CamelModel):
    """Tokens issued by the refresh endpoint; the refresh token is only present when rotated."""

    access_token: str = Field(..., min_length=1)
    refresh_token: Optional[str] = None


class LoginResult(TokenPair):
    """Payload returned by a successful ``/auth/login`` call."""

    user: AdminUser


__all__ = ["AdminUser", "LoginResult", "TokenPair", "UserRole"]
