"""Household overview models.

Projections arrive from the data service frozen; the reader builds its own
mutable view-model from a deep copy.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from fostercare.core.types import Icon, RecordModel, flag_icon

PRIMARY_CONTACT_RECORD_TYPE = "Primary Contact"

_FROZEN = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class HouseholdInfo(RecordModel):
    model_config = _FROZEN

    account_name: str = ""
    status: str = ""
    home_type: str = ""
    bedrooms: int = 0
    home_safety_verified: bool = False


class ContactSummary(RecordModel):
    """A contact attached to a household account."""

    model_config = _FROZEN

    contact_id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    record_type: str = ""
    relationship: str = ""
    background_check_status: str = ""
    training_completed: bool = False
    home_study_completed: bool = False


class OverviewProjection(RecordModel):
    """Read-only aggregate delivered by ``fetch_overview``."""

    model_config = _FROZEN

    account_id: str
    household_info: HouseholdInfo = Field(default_factory=HouseholdInfo)
    contacts: list[ContactSummary] = Field(default_factory=list)
    primary_caseworker_id: str | None = None


class CaseworkerCandidate(RecordModel):
    id: str
    name: str
    current_case_load: int = 0
    maximum_case_load: int = 0
    availability_status: str = "Available"

    @property
    def option_label(self) -> str:
        return (
            f"{self.name} ({self.current_case_load}/{self.maximum_case_load})"
            f" - {self.availability_status}"
        )


class ContactView(RecordModel):
    """A contact enriched with presentation-only fields."""

    contact_id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    record_type: str = ""
    relationship: str = ""
    background_check_status: str = ""
    training_completed: bool = False
    home_study_completed: bool = False
    contact_link: str = ""
    icon_name: Icon = Icon.CONTACT
    training_icon: Icon = Icon.CLOSE
    home_study_icon: Icon = Icon.CLOSE

    @classmethod
    def from_contact(cls, contact: ContactSummary) -> ContactView:
        return cls(
            **contact.model_dump(),
            contact_link=f"/{contact.contact_id}",
            icon_name=(
                Icon.AVATAR
                if contact.record_type == PRIMARY_CONTACT_RECORD_TYPE
                else Icon.CONTACT
            ),
            training_icon=flag_icon(contact.training_completed),
            home_study_icon=flag_icon(contact.home_study_completed),
        )


class OverviewViewModel(RecordModel):
    account_id: str
    household_info: HouseholdInfo
    contacts: list[ContactView] = Field(default_factory=list)
    primary_caseworker_id: str | None = None

    @property
    def household_safety_icon(self) -> Icon:
        return flag_icon(self.household_info.home_safety_verified)
