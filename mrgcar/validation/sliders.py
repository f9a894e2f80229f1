# =============================================================================
# File: mrgcar/validation/sliders.py
# Purpose: Homepage slider schemas. ``isActive`` and ``order`` are strict:
#          "true" / "3" strings are rejected, only JSON booleans / integers.
# =============================================================================
from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import Field

from .fields import Schema, UpdateSchema, UrlStr

LinkType = Literal["car", "news", "external"]


class CreateSlider(Schema):
    title: str = Field(min_length=3, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    image_url: UrlStr = Field(alias="imageUrl")
    link_type: Optional[LinkType] = Field(default=None, alias="linkType")
    link_id: Optional[uuid.UUID] = Field(default=None, alias="linkId")
    link_url: Optional[UrlStr] = Field(default=None, alias="linkUrl")
    is_active: bool = Field(default=True, strict=True, alias="isActive")
    order: int = Field(default=0, ge=0, strict=True)


class UpdateSlider(UpdateSchema):
    nullable_fields = frozenset({"subtitle", "link_type", "link_id", "link_url"})

    title: Optional[str] = Field(default=None, min_length=3, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    image_url: Optional[UrlStr] = Field(default=None, alias="imageUrl")
    link_type: Optional[LinkType] = Field(default=None, alias="linkType")
    link_id: Optional[uuid.UUID] = Field(default=None, alias="linkId")
    link_url: Optional[UrlStr] = Field(default=None, alias="linkUrl")
    is_active: Optional[bool] = Field(default=None, strict=True, alias="isActive")
    order: Optional[int] = Field(default=None, ge=0, strict=True)
