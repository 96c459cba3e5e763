"""Notification records captured from observers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class NotificationBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    kind: Literal["NEXT", "COMPLETE"]
    seq: int = Field(ge=1)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    observer: str
    clock: float | None = None


class NextNotification(NotificationBase):
    kind: Literal["NEXT"] = "NEXT"
    value: Any


class CompleteNotification(NotificationBase):
    kind: Literal["COMPLETE"] = "COMPLETE"


AnyNotification = Annotated[NextNotification | CompleteNotification, Field(discriminator="kind")]
