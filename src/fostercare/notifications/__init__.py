"""User-facing presentation capability: toasts, confirmations, scroll resets."""

from fostercare.notifications.models import Notification
from fostercare.notifications.service import Presenter, RecordingPresenter
from fostercare.notifications.store import NotificationStore

__all__ = ["Notification", "NotificationStore", "Presenter", "RecordingPresenter"]
