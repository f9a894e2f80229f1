# =============================================================================
# File: mrgcar/validation/uploads.py
# Purpose: Presigned upload / delete requests (images only).
# =============================================================================
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from .fields import Schema, UrlStr

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "webp")
ALLOWED_FOLDERS = ("cars", "news", "sliders", "profiles", "banners")

UploadFolder = Literal["cars", "news", "sliders", "profiles", "banners"]


class PresignUpload(Schema):
    filename: str = Field(min_length=1, max_length=255)
    content_type: str = Field(alias="contentType")
    folder: UploadFolder
    # cars/ uploads are filed under make/model
    make: Optional[str] = None
    model: Optional[str] = None

    @field_validator("filename")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        ext = value.rsplit(".", 1)[-1].lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise PydanticCustomError(
                "file_extension",
                "Invalid file extension. Allowed: {allowed}",
                {"allowed": ", ".join(ALLOWED_EXTENSIONS)},
            )
        return value

    @field_validator("content_type")
    @classmethod
    def _check_content_type(cls, value: str) -> str:
        if value.lower() not in ALLOWED_CONTENT_TYPES:
            raise PydanticCustomError(
                "content_type",
                "Invalid content type. Allowed: {allowed}",
                {"allowed": ", ".join(ALLOWED_CONTENT_TYPES)},
            )
        return value


class DeleteUpload(Schema):
    key: Optional[str] = None
    keys: Optional[list[str]] = None
    public_url: Optional[UrlStr] = Field(default=None, alias="publicUrl")
    public_urls: Optional[list[UrlStr]] = Field(default=None, alias="publicUrls")

    @model_validator(mode="after")
    def _require_target(self):
        if not (self.key or self.keys or self.public_url or self.public_urls):
            raise PydanticCustomError(
                "missing_target",
                'Either "key", "keys", "publicUrl", or "publicUrls" must be provided',
            )
        return self
