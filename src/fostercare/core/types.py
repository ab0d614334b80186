"""Core type definitions shared across all fostercare modules."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Severity(StrEnum):
    """Severity of a user-visible notification."""

    SUCCESS = "success"
    ERROR = "error"


class ApplicationType(StrEnum):
    """Role discriminator chosen by an applicant."""

    FOSTER_PARENT = "Foster Parent"
    CASEWORKER = "Caseworker"


class Relationship(StrEnum):
    SPOUSE = "Spouse"
    PARTNER = "Partner"
    CHILD = "Child"
    PARENT = "Parent"
    SIBLING = "Sibling"
    OTHER_RELATIVE = "Other Relative"
    OTHER = "Other"


class HomeType(StrEnum):
    OWN = "Own"
    RENT = "Rent"
    WITH_FAMILY = "With Family"
    OTHER = "Other"


class Icon(StrEnum):
    """Icon names understood by the record-page shell."""

    CHECK = "utility:check"
    CLOSE = "utility:close"
    AVATAR = "standard:avatar"
    CONTACT = "standard:contact"


def flag_icon(value: bool | None) -> Icon:
    return Icon.CHECK if value else Icon.CLOSE


class RecordModel(BaseModel):
    """Base model for records exchanged with the data service.

    Python attributes are snake_case; the wire format is camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SelectOption(BaseModel):
    """A label/value pair for a picklist."""

    label: str
    value: str


def enum_options(enum_cls: type[StrEnum], labels: dict[str, str] | None = None) -> list[SelectOption]:
    """Build picklist options from an enum, with optional label overrides."""
    labels = labels or {}
    return [SelectOption(label=labels.get(m.value, m.value), value=m.value) for m in enum_cls]
