# =============================================================================
# File: mrgcar/validation/fields.py
# Purpose: Shared base classes and field types for request schemas.
# =============================================================================
from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import (
    AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError, ValidationInfo,
    field_validator, model_validator,
)
from pydantic_core import PydanticCustomError


_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # AnyUrl normalises (trailing slash, lowercase host), so it only checks
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Input should be a valid URL") from None
    return value


# Any absolute URL, handed to the views exactly as sent.
UrlStr = Annotated[str, AfterValidator(_check_url)]


class Schema(BaseModel):
    """Request schema: camelCase aliases on the wire, unknown keys dropped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def reject_null(value):
    """For optional-but-not-nullable fields: absent is fine, explicit null is not."""
    if value is None:
        raise PydanticCustomError("not_nullable", "Field cannot be null")
    return value


class UpdateSchema(Schema):
    """Update payload: every field may be left out, none may be sent as null
    unless it is listed in ``nullable_fields``."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        if info.field_name in cls.nullable_fields:
            return value
        return reject_null(value)


class PartialUpdate(UpdateSchema):
    """Update payload that must carry at least one field."""

    @model_validator(mode="after")
    def _require_one_field(self):
        if not self.model_fields_set:
            raise PydanticCustomError("empty_update", "At least one field must be updated")
        return self
