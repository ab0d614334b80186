"""In-memory data service seeded with fixture records."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from fostercare.core.config import RemoteConfig
from fostercare.core.errors import RemoteError
from fostercare.households.models import (
    PRIMARY_CONTACT_RECORD_TYPE,
    CaseworkerCandidate,
    ContactSummary,
    OverviewProjection,
)
from fostercare.intake.models import ApplicationPayload
from fostercare.members.models import FamilyMember, PrimaryContactInfo
from fostercare.remote.client import DataService

logger = logging.getLogger(__name__)

AVAILABLE = "Available"

_FIXTURE_ACCOUNTS: list[dict[str, Any]] = [
    {
        "account_id": "001-HARTLEY",
        "household_info": {
            "account_name": "Hartley Household",
            "status": "Home Study",
            "home_type": "Own",
            "bedrooms": 4,
            "home_safety_verified": True,
        },
        "contacts": [
            {
                "contact_id": "003-DANA",
                "name": "Dana Hartley",
                "email": "dana@example.com",
                "phone": "555-0101",
                "record_type": PRIMARY_CONTACT_RECORD_TYPE,
                "background_check_status": "Cleared",
                "training_completed": True,
                "home_study_completed": False,
            },
            {
                "contact_id": "003-SAM",
                "name": "Sam Hartley",
                "record_type": "Family Member",
                "relationship": "Spouse",
                "background_check_status": "Pending",
            },
        ],
        "primary_caseworker_id": "005-RIVERA",
    },
    {
        "account_id": "001-OKAFOR",
        "household_info": {
            "account_name": "Okafor Household",
            "status": "Inquiry",
            "home_type": "Rent",
            "bedrooms": 2,
        },
        "contacts": [
            {
                "contact_id": "003-ADA",
                "name": "Ada Okafor",
                "record_type": PRIMARY_CONTACT_RECORD_TYPE,
            },
        ],
        "primary_caseworker_id": None,
    },
]

_FIXTURE_CASEWORKERS: list[dict[str, Any]] = [
    {"id": "005-RIVERA", "name": "Luis Rivera", "current_case_load": 11, "maximum_case_load": 15},
    {"id": "005-CHEN", "name": "Mei Chen", "current_case_load": 4, "maximum_case_load": 12},
    {
        "id": "005-BROOKS",
        "name": "Tara Brooks",
        "current_case_load": 12,
        "maximum_case_load": 12,
        "availability_status": "At Capacity",
    },
]

_FIXTURE_PRIMARY_CONTACT: dict[str, Any] = {
    "contact_id": "003-DANA",
    "account_id": "001-HARTLEY",
    "first_name": "Dana",
    "last_name": "Hartley",
    "email": "dana@example.com",
    "phone": "555-0101",
    "account_name": "Hartley Household",
}

_FIXTURE_MEMBERS: list[dict[str, Any]] = [
    {
        "id": "003-SAM",
        "first_name": "Sam",
        "last_name": "Hartley",
        "relationship": "Spouse",
    },
]


class InMemoryDataService(DataService):
    """Dict-backed data service that enforces the server-side rules.

    Suitable for demos and tests; state lives for the lifetime of the instance.
    """

    def __init__(self, config: RemoteConfig | None = None, *, seed: bool = True) -> None:
        self.config = config or RemoteConfig(provider="memory")
        self._accounts: dict[str, OverviewProjection] = {}
        self._caseworkers: dict[str, CaseworkerCandidate] = {}
        self._members: dict[str, FamilyMember] = {}
        self._primary_contact: PrimaryContactInfo | None = None
        self.applications: dict[str, ApplicationPayload] = {}
        self.calls: list[str] = []
        if seed:
            self._seed()

    def _seed(self) -> None:
        for data in _FIXTURE_ACCOUNTS:
            self.add_account(OverviewProjection.model_validate(data))
        for data in _FIXTURE_CASEWORKERS:
            self.add_caseworker(CaseworkerCandidate.model_validate(data))
        for data in _FIXTURE_MEMBERS:
            member = FamilyMember.model_validate(data)
            self._members[member.id] = member
        self._primary_contact = PrimaryContactInfo.model_validate(_FIXTURE_PRIMARY_CONTACT)

    # -- fixture management --

    def add_account(self, projection: OverviewProjection) -> None:
        self._accounts[projection.account_id] = projection

    def add_caseworker(self, candidate: CaseworkerCandidate) -> None:
        self._caseworkers[candidate.id] = candidate

    def set_primary_contact(self, contact: PrimaryContactInfo | None) -> None:
        self._primary_contact = contact

    def get_caseworker(self, caseworker_id: str) -> CaseworkerCandidate | None:
        return self._caseworkers.get(caseworker_id)

    # -- DataService --

    async def fetch_overview(self, account_id: str) -> OverviewProjection:
        self.calls.append("fetch_overview")
        projection = self._accounts.get(account_id)
        if projection is None:
            raise RemoteError(f"Account {account_id} not found", status_code=404,
                              body={"message": "Account not found"})
        return projection.model_copy(deep=True)

    async def fetch_candidates(self) -> list[CaseworkerCandidate]:
        self.calls.append("fetch_candidates")
        return [
            c.model_copy()
            for c in sorted(self._caseworkers.values(), key=lambda c: c.current_case_load)
        ]

    async def assign_caseworker(self, account_id: str, caseworker_id: str) -> None:
        self.calls.append("assign_caseworker")
        projection = self._accounts.get(account_id)
        if projection is None:
            raise RemoteError(f"Account {account_id} not found", status_code=404,
                              body={"message": "Account not found"})
        candidate = self._caseworkers.get(caseworker_id)
        if candidate is None:
            raise RemoteError("Caseworker not found", status_code=404,
                              body={"message": "Caseworker not found"})
        if projection.primary_caseworker_id == caseworker_id:
            return
        if (
            candidate.availability_status != AVAILABLE
            or candidate.current_case_load >= candidate.maximum_case_load
        ):
            raise RemoteError("Caseworker at capacity", status_code=400,
                              body={"message": f"{candidate.name} has no remaining capacity"})

        previous = self._caseworkers.get(projection.primary_caseworker_id or "")
        if previous is not None:
            previous.current_case_load = max(0, previous.current_case_load - 1)
        candidate.current_case_load += 1
        self._accounts[account_id] = projection.model_copy(
            update={"primary_caseworker_id": caseworker_id},
        )
        logger.info("Assigned caseworker %s to account %s", caseworker_id, account_id)

    async def fetch_primary_contact(self) -> PrimaryContactInfo:
        self.calls.append("fetch_primary_contact")
        if self._primary_contact is None:
            raise RemoteError("No primary contact for the current user", status_code=404,
                              body={"message": "No primary contact found for the current user"})
        return self._primary_contact.model_copy()

    async def fetch_family_members(self) -> list[FamilyMember]:
        self.calls.append("fetch_family_members")
        return [m.model_copy() for m in self._members.values()]

    async def create_family_member(self, member: FamilyMember) -> FamilyMember:
        self.calls.append("create_family_member")
        stored = member.model_copy(update={"id": f"003-{uuid.uuid4().hex[:8].upper()}"})
        self._members[stored.id] = stored
        self._sync_contact(stored)
        return stored.model_copy()

    async def update_family_member(self, member: FamilyMember) -> FamilyMember:
        self.calls.append("update_family_member")
        if not member.id or member.id not in self._members:
            raise RemoteError("Family member not found", status_code=404,
                              body={"message": "Family member not found"})
        stored = member.model_copy()
        self._members[stored.id] = stored
        self._sync_contact(stored)
        return stored.model_copy()

    async def delete_family_member(self, member_id: str) -> None:
        self.calls.append("delete_family_member")
        if self._members.pop(member_id, None) is None:
            raise RemoteError("Family member not found", status_code=404,
                              body={"message": "Family member not found"})
        self._sync_contact(None, removed_id=member_id)

    async def submit_application(self, payload: ApplicationPayload) -> str:
        self.calls.append("submit_application")
        application_id = str(uuid.uuid4())
        self.applications[application_id] = payload.model_copy(deep=True)
        logger.info(
            "Received %s application with %d family member(s)",
            payload.primary_applicant.application_type, len(payload.family_members),
        )
        return application_id

    def _sync_contact(self, member: FamilyMember | None, removed_id: str | None = None) -> None:
        """Mirror member changes onto the primary contact's household overview."""
        if self._primary_contact is None or not self._primary_contact.account_id:
            return
        projection = self._accounts.get(self._primary_contact.account_id)
        if projection is None:
            return
        contacts = [
            c for c in projection.contacts
            if c.contact_id not in {removed_id, member.id if member else None}
        ]
        if member is not None:
            contacts.append(ContactSummary(
                contact_id=member.id,
                name=member.full_name,
                email=member.email,
                phone=member.phone,
                record_type="Family Member",
                relationship=member.relationship,
                background_check_status=member.background_check_status,
                training_completed=member.training_completed,
                home_study_completed=member.home_study_completed,
            ))
        self._accounts[projection.account_id] = projection.model_copy(update={"contacts": contacts})

