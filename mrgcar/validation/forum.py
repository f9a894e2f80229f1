# =============================================================================
# File: mrgcar/validation/forum.py
# Purpose: Request schemas for the forum API.
# =============================================================================
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .fields import Schema


class CreateForumPost(Schema):
    title: str = Field(min_length=5, max_length=200)
    description: str = Field(min_length=10, max_length=500)
    content: str = Field(min_length=20, max_length=10000)
    category: str = "Genel Sohbet"
    category_id: str = Field(default="general", alias="categoryId")
    user_name: str = Field(default="Anonim", min_length=2, max_length=50, alias="userName")
    car_brand: Optional[str] = Field(default=None, max_length=50, alias="carBrand")
    car_model: Optional[str] = Field(default=None, max_length=50, alias="carModel")


class ListForumPostsQuery(Schema):
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)
