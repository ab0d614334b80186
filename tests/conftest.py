"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Callable

import pytest

from fostercare.core.errors import RemoteError
from fostercare.notifications.service import RecordingPresenter
from fostercare.remote.memory import InMemoryDataService


class ScriptedService(InMemoryDataService):
    """In-memory service whose operations can be failed or observed mid-call.

    ``failures[op]`` is raised on every call to *op* until removed;
    ``observers[op]`` runs inside the call, before the real work.
    """

    def __init__(self) -> None:
        super().__init__()
        self.failures: dict[str, RemoteError] = {}
        self.observers: dict[str, Callable[[], None]] = {}

    def fail(self, op: str, message: str = "boom") -> None:
        self.failures[op] = RemoteError(message, status_code=500, body={"message": message})

    def _enter(self, op: str) -> None:
        observer = self.observers.get(op)
        if observer is not None:
            observer()
        if op in self.failures:
            self.calls.append(op)
            raise self.failures[op]

    async def fetch_overview(self, account_id):
        self._enter("fetch_overview")
        return await super().fetch_overview(account_id)

    async def fetch_candidates(self):
        self._enter("fetch_candidates")
        return await super().fetch_candidates()

    async def assign_caseworker(self, account_id, caseworker_id):
        self._enter("assign_caseworker")
        return await super().assign_caseworker(account_id, caseworker_id)

    async def fetch_primary_contact(self):
        self._enter("fetch_primary_contact")
        return await super().fetch_primary_contact()

    async def fetch_family_members(self):
        self._enter("fetch_family_members")
        return await super().fetch_family_members()

    async def create_family_member(self, member):
        self._enter("create_family_member")
        return await super().create_family_member(member)

    async def update_family_member(self, member):
        self._enter("update_family_member")
        return await super().update_family_member(member)

    async def delete_family_member(self, member_id):
        self._enter("delete_family_member")
        return await super().delete_family_member(member_id)

    async def submit_application(self, payload):
        self._enter("submit_application")
        return await super().submit_application(payload)


@pytest.fixture
def service():
    return ScriptedService()


@pytest.fixture
def presenter():
    return RecordingPresenter()
