"""In-memory notification store."""

from __future__ import annotations

from fostercare.core.types import Severity
from fostercare.notifications.models import Notification


class NotificationStore:
    """In-memory, insertion-ordered store for notifications."""

    def __init__(self) -> None:
        self._notifications: dict[str, Notification] = {}

    def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    def get(self, notification_id: str) -> Notification | None:
        return self._notifications.get(notification_id)

    def list_all(self) -> list[Notification]:
        return list(self._notifications.values())

    def list_by_severity(self, severity: Severity) -> list[Notification]:
        return [n for n in self._notifications.values() if n.severity == severity]

    @property
    def last(self) -> Notification | None:
        if not self._notifications:
            return None
        return next(reversed(self._notifications.values()))

    @property
    def count(self) -> int:
        return len(self._notifications)

    def clear(self) -> None:
        self._notifications.clear()
