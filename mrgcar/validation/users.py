# =============================================================================
# File: mrgcar/validation/users.py
# Purpose: Admin-side user management schemas.
# =============================================================================
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from .fields import PartialUpdate, Schema, UrlStr

UserRole = Literal["user", "moderator", "admin"]
UserStatus = Literal["active", "banned", "temp_banned", "restricted"]
Restriction = Literal["forum", "comments", "uploads", "messaging"]


class UpdateUser(PartialUpdate):
    nullable_fields = frozenset({"avatar_url"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    avatar_url: Optional[UrlStr] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None


class TempBan(Schema):
    days: int = Field(ge=1, le=365)


class Restrict(Schema):
    restrictions: list[Restriction] = Field(min_length=1)
