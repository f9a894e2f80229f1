# mrgcar/routes/_common.py
from __future__ import annotations

import datetime as dt
import uuid


def iso(value: dt.datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def parse_uuid(raw: str) -> uuid.UUID | None:
    """Path ids are UUIDs; anything else simply matches nothing."""
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None
