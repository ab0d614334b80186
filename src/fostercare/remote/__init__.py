"""Remote data service clients and subscriptions."""

from __future__ import annotations

from fostercare.remote.client import DataService, create_data_service
from fostercare.remote.http import HttpDataService
from fostercare.remote.memory import InMemoryDataService
from fostercare.remote.subscription import Subscription, SubscriptionResult

PROVIDER_REGISTRY: dict[str, type[DataService]] = {
    "http": HttpDataService,
    "memory": InMemoryDataService,
}

__all__ = [
    "PROVIDER_REGISTRY",
    "DataService",
    "HttpDataService",
    "InMemoryDataService",
    "Subscription",
    "SubscriptionResult",
    "create_data_service",
]
