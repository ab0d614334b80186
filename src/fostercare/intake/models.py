"""Shared models for the application wizard."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from fostercare.core.types import (
    ApplicationType,
    HomeType,
    RecordModel,
    Relationship,
    enum_options,
)


class WizardStep(StrEnum):
    STEP1 = "step1"
    STEP2 = "step2"
    STEP3 = "step3"
    STEP4 = "step4"


APPLICATION_TYPE_OPTIONS = enum_options(ApplicationType)
RELATIONSHIP_OPTIONS = enum_options(Relationship, {Relationship.CHILD.value: "Adult Child"})
HOME_TYPE_OPTIONS = enum_options(HomeType)


class PrimaryApplicant(RecordModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    application_type: str = ""


class HouseholdDraft(RecordModel):
    home_type: str = ""
    bedrooms: int = 0
    square_footage: int = 0
    has_pool: bool = False
    has_pets: bool = False
    pet_details: str = ""
    smoking: bool = False


class FamilyMemberDraft(RecordModel):
    """A household member captured locally; ``temp_id`` is stamped on add."""

    temp_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    birthdate: date | None = None
    relationship: str = ""
    employer_name: str = ""
    job_title: str = ""
    monthly_income: Decimal | None = None


class ApplicationPayload(RecordModel):
    """The single document sent by ``submit_application``."""

    primary_applicant: PrimaryApplicant
    family_members: list[FamilyMemberDraft] = Field(default_factory=list)
    # Wire-form household draft; empty for caseworker applications.
    household_info: dict[str, Any] = Field(default_factory=dict)


class StepDefinition(BaseModel):
    """Definition of a single wizard step."""

    id: WizardStep
    title: str
    description: str = ""
    required_fields: list[str] = Field(default_factory=list)
    skip_if: dict[str, Any] | None = None


class WizardDefinition(BaseModel):
    """Full definition of a wizard loaded from YAML."""

    id: str
    title: str
    description: str = ""
    steps: list[StepDefinition] = Field(default_factory=list)
