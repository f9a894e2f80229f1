# =============================================================================
# File: mrgcar/validation/__init__.py
# Purpose: ``@validate(Schema)`` view decorator. Parsing is left to pydantic;
#          failures become a 400 VALIDATION_ERROR envelope.
# =============================================================================
from __future__ import annotations

import logging
from functools import wraps

from flask import g, request
from pydantic import BaseModel, ValidationError

from mrgcar import responses

log = logging.getLogger(__name__)

SOURCES = ("body", "query")


def format_errors(exc: ValidationError) -> list[dict]:
    """Flatten pydantic errors to ``[{"field": "a.b", "message": ...}]``."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]


def _payload(source: str):
    if source == "query":
        return request.args.to_dict(flat=True)
    # missing or malformed JSON validates as an empty object
    data = request.get_json(silent=True)
    return {} if data is None else data


def validate(schema: type[BaseModel], source: str = "body"):
    """Validate the request body (or query string) against ``schema``.

    On success the parsed model is stored on ``g.validated_body`` /
    ``g.validated_query`` and the view runs.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(f"validate() expects a pydantic model class, got {schema!r}")
    if source not in SOURCES:
        raise ValueError(f"validate() source must be one of {SOURCES}, got {source!r}")

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                parsed = schema.model_validate(_payload(source))
            except ValidationError as exc:
                details = format_errors(exc)
                log.info(
                    "Validation failed for %s %s",
                    request.method, request.path,
                    extra={"schema": schema.__name__, "details": details},
                )
                return responses.validation_error(details)

            setattr(g, f"validated_{source}", parsed)
            return view(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["validate", "format_errors"]
