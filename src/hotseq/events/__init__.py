"""Notification records and recording observers."""

from hotseq.events.recorder import RecordingObserver, SequenceCounter
from hotseq.events.schemas import (
    AnyNotification,
    CompleteNotification,
    NextNotification,
    NotificationBase,
)

__all__ = [
    "AnyNotification",
    "CompleteNotification",
    "NextNotification",
    "NotificationBase",
    "RecordingObserver",
    "SequenceCounter",
]
