"""Family member models."""

from __future__ import annotations

from datetime import date

from fostercare.core.types import RecordModel, Relationship, enum_options

REQUIRED_MEMBER_FIELDS = ("first_name", "last_name", "relationship")

RELATIONSHIP_OPTIONS = enum_options(Relationship)


class FamilyMember(RecordModel):
    """A household member record. ``id`` stays None until persisted."""

    id: str | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    mobile_phone: str = ""
    birthdate: date | None = None
    relationship: str = ""
    background_check_status: str = "Pending"
    training_completed: bool = False
    home_study_completed: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class PrimaryContactInfo(RecordModel):
    """Summary of the signed-in user's primary contact record."""

    contact_id: str
    account_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    account_name: str = ""
