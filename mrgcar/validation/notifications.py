# mrgcar/validation/notifications.py
from __future__ import annotations

from pydantic import Field

from .fields import Schema


class SendNotification(Schema):
    title: str = Field(min_length=3, max_length=100)
    body: str = Field(min_length=5, max_length=500)
    topic: str = Field(default="all", min_length=1, max_length=50)
