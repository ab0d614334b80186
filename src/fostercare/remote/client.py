"""Abstract data service interface and factory function."""

from __future__ import annotations

import abc

from fostercare.core.config import RemoteConfig
from fostercare.households.models import CaseworkerCandidate, OverviewProjection
from fostercare.intake.models import ApplicationPayload
from fostercare.members.models import FamilyMember, PrimaryContactInfo


class DataService(abc.ABC):
    """Remote record service consumed by the components.

    Every operation raises :class:`~fostercare.core.errors.RemoteError` on
    failure and nothing else.
    """

    @abc.abstractmethod
    async def fetch_overview(self, account_id: str) -> OverviewProjection:
        """Return the household overview projection for an account."""

    @abc.abstractmethod
    async def fetch_candidates(self) -> list[CaseworkerCandidate]:
        """Return caseworkers that may take on a household."""

    @abc.abstractmethod
    async def assign_caseworker(self, account_id: str, caseworker_id: str) -> None:
        """Make *caseworker_id* the primary caseworker of the account."""

    @abc.abstractmethod
    async def fetch_primary_contact(self) -> PrimaryContactInfo:
        """Return the signed-in user's primary contact summary."""

    @abc.abstractmethod
    async def fetch_family_members(self) -> list[FamilyMember]:
        """Return the signed-in household's family members."""

    @abc.abstractmethod
    async def create_family_member(self, member: FamilyMember) -> FamilyMember:
        """Persist a new family member and return it with its id."""

    @abc.abstractmethod
    async def update_family_member(self, member: FamilyMember) -> FamilyMember:
        """Persist changes to an existing family member."""

    @abc.abstractmethod
    async def delete_family_member(self, member_id: str) -> None:
        """Remove a family member."""

    @abc.abstractmethod
    async def submit_application(self, payload: ApplicationPayload) -> str:
        """Submit a completed application; returns the new application id."""

    async def close(self) -> None:
        """Clean up resources. Override if the service holds connections."""


def create_data_service(config: RemoteConfig) -> DataService:
    """Factory: select and instantiate a data service based on config.provider."""

    from fostercare.remote import PROVIDER_REGISTRY

    provider = config.provider.lower()
    if provider not in PROVIDER_REGISTRY:
        available = ", ".join(sorted(PROVIDER_REGISTRY))
        raise ValueError(
            f"Unknown data service provider {config.provider!r}. "
            f"Available: {available}"
        )

    cls = PROVIDER_REGISTRY[provider]
    return cls(config)
