"""Notification data models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from fostercare.core.types import Severity


class Notification(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    message: str
    severity: Severity = Severity.SUCCESS
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
