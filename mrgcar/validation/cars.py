# =============================================================================
# File: mrgcar/validation/cars.py
# Purpose: Request schemas for the cars API.
# =============================================================================
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field

from .fields import PartialUpdate, Schema

CarStatus = Literal["draft", "published"]


class CreateCar(Schema):
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    variant: str = ""
    body_type: str = Field(default="", alias="bodyType")
    status: CarStatus = "draft"
    data: dict[str, Any] = Field(default_factory=dict)


class UpdateCar(PartialUpdate):
    make: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    variant: Optional[str] = None
    body_type: Optional[str] = Field(default=None, alias="bodyType")
    status: Optional[CarStatus] = None
    data: Optional[dict[str, Any]] = None


class ListCarsQuery(Schema):
    """GET /cars query string; numbers arrive as strings and are coerced."""

    status: Literal["draft", "published", "all"] = "published"
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)
