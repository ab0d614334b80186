"""Presenter Protocol and a recording implementation."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from fostercare.core.types import Severity
from fostercare.notifications.models import Notification
from fostercare.notifications.store import NotificationStore

logger = logging.getLogger(__name__)


@runtime_checkable
class Presenter(Protocol):
    """Protocol for the UI shell hosting the components."""

    def notify(self, title: str, message: str, severity: Severity) -> None: ...

    def confirm(self, message: str) -> bool: ...

    def scroll_to_top(self) -> None: ...


class RecordingPresenter:
    """Headless presenter that records every side effect.

    Confirmation prompts are answered with ``confirm_answer``.
    """

    def __init__(self, store: NotificationStore | None = None, confirm_answer: bool = True) -> None:
        self._store = store or NotificationStore()
        self.confirm_answer = confirm_answer
        self.prompts: list[str] = []
        self.scroll_resets = 0

    @property
    def store(self) -> NotificationStore:
        return self._store

    def notify(self, title: str, message: str, severity: Severity) -> None:
        logger.debug("%s notification: %s - %s", severity, title, message)
        self._store.save(Notification(title=title, message=message, severity=Severity(severity)))

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.confirm_answer

    def scroll_to_top(self) -> None:
        self.scroll_resets += 1
