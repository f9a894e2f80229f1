# =============================================================================
# File: mrgcar/validation/reviews.py
# Purpose: Request schemas for car reviews.
# =============================================================================
from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import Field

from .fields import PartialUpdate, Schema, UrlStr


class CreateReview(Schema):
    car_id: Optional[uuid.UUID] = Field(default=None, alias="carId")
    rating: Optional[int] = Field(default=None, ge=1, le=10)
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10000)
    pros: Optional[str] = Field(default=None, max_length=2000)
    cons: Optional[str] = Field(default=None, max_length=2000)
    is_featured: bool = Field(default=False, strict=True, alias="isFeatured")
    is_admin_review: bool = Field(default=True, strict=True, alias="isAdminReview")
    # single image kept for older clients, images[] for new ones
    image: Optional[UrlStr] = None
    images: Optional[list[UrlStr]] = Field(default=None, max_length=10)
    author_name: Optional[str] = Field(default=None, max_length=100, alias="authorName")


class UpdateReview(PartialUpdate):
    nullable_fields = frozenset({"car_id", "pros", "cons"})

    car_id: Optional[uuid.UUID] = Field(default=None, alias="carId")
    rating: Optional[int] = Field(default=None, ge=1, le=10)
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1, max_length=10000)
    pros: Optional[str] = Field(default=None, max_length=2000)
    cons: Optional[str] = Field(default=None, max_length=2000)
    is_featured: Optional[bool] = Field(default=None, strict=True, alias="isFeatured")
    status: Optional[Literal["draft", "published"]] = None
    images: Optional[list[UrlStr]] = Field(default=None, max_length=10)
