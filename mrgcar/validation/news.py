# =============================================================================
# File: mrgcar/validation/news.py
# Purpose: Request schemas for the news API.
# =============================================================================
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .fields import Schema, UpdateSchema, UrlStr


class CreateNews(Schema):
    title: str = Field(min_length=5, max_length=200)
    description: str = Field(min_length=10, max_length=500)
    content: str = Field(min_length=20, max_length=50000)
    category: str = Field(default="Genel", max_length=100)
    author: str = Field(min_length=2, max_length=100)
    image: Optional[UrlStr] = None
    tags: list[str] = Field(default_factory=list, max_length=20)
    is_popular: bool = Field(default=False, alias="isPopular")


class UpdateNews(UpdateSchema):
    """Every field optional; whatever is sent must still be valid."""

    nullable_fields = frozenset({"image"})

    title: Optional[str] = Field(default=None, min_length=5, max_length=200)
    description: Optional[str] = Field(default=None, min_length=10, max_length=500)
    content: Optional[str] = Field(default=None, min_length=20, max_length=50000)
    category: Optional[str] = Field(default=None, max_length=100)
    author: Optional[str] = Field(default=None, min_length=2, max_length=100)
    image: Optional[UrlStr] = None
