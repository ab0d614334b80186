"""Subscriptions: re-pullable bindings to server-held records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

from fostercare.core.errors import RemoteError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SubscriptionResult(Generic[T]):
    """One delivery: exactly one of ``data`` and ``error`` is set."""

    data: T | None = None
    error: RemoteError | None = None


class Subscription(Generic[T]):
    """Handle bound to a fetch operation.

    Each :meth:`refresh` pulls the latest server state and delivers it to
    the callback. Remote failures are delivered, never raised.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[T]],
        callback: Callable[[SubscriptionResult[T]], None],
        name: str = "",
    ) -> None:
        self._fetch = fetch
        self._callback = callback
        self.name = name or getattr(fetch, "__name__", "subscription")
        self._closed = False
        self.deliveries = 0

    @property
    def closed(self) -> bool:
        return self._closed

    async def refresh(self) -> SubscriptionResult[T] | None:
        """Re-pull and deliver. Returns the delivered result, or None if closed."""
        if self._closed:
            return None
        try:
            result = SubscriptionResult(data=await self._fetch())
        except RemoteError as exc:
            logger.warning("Subscription %s delivered an error: %s", self.name, exc)
            result = SubscriptionResult(error=exc)
        # Closed while the pull was in flight.
        if self._closed:
            return None
        self.deliveries += 1
        self._callback(result)
        return result

    def close(self) -> None:
        self._closed = True
