"""Step wizard for the public foster application form."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import yaml

from fostercare.core.drafts import patch, resolve_field
from fostercare.core.errors import RemoteError, error_message
from fostercare.core.types import ApplicationType, Severity
from fostercare.core.validation import validate_required_fields
from fostercare.intake.models import (
    APPLICATION_TYPE_OPTIONS,
    HOME_TYPE_OPTIONS,
    RELATIONSHIP_OPTIONS,
    ApplicationPayload,
    FamilyMemberDraft,
    HouseholdDraft,
    PrimaryApplicant,
    StepDefinition,
    WizardDefinition,
    WizardStep,
)
from fostercare.notifications.service import Presenter
from fostercare.remote.client import DataService

logger = logging.getLogger(__name__)

_DEFAULT_WIZARDS_DIR = Path(__file__).resolve().parent / "wizards"
DEFAULT_WIZARD_ID = "foster_application"


def _parse_step(data: dict[str, Any]) -> StepDefinition:
    return StepDefinition(
        id=WizardStep(data["id"]),
        title=data.get("title", data["id"]),
        description=data.get("description", ""),
        required_fields=data.get("required_fields", []),
        skip_if=data.get("skip_if"),
    )


def load_wizard(path: Path) -> WizardDefinition:
    with open(path) as fh:
        data = yaml.safe_load(fh)
    steps = [_parse_step(s) for s in data.get("steps", [])]
    return WizardDefinition(
        id=data["id"],
        title=data.get("title", data["id"]),
        description=data.get("description", ""),
        steps=steps,
    )


def load_wizards(wizards_dir: str | Path | None = None) -> dict[str, WizardDefinition]:
    """Load every ``*.yml`` wizard definition in a directory, keyed by id."""
    path = Path(wizards_dir) if wizards_dir else _DEFAULT_WIZARDS_DIR
    wizards: dict[str, WizardDefinition] = {}
    if not path.exists():
        return wizards
    for file in sorted(path.glob("*.yml")):
        defn = load_wizard(file)
        wizards[defn.id] = defn
    return wizards


class ApplicationWizard:
    """Draft-holding wizard that walks applicants through the form steps.

    Nothing is persisted until :meth:`submit`. Family members added on the
    family step live only in ``family_members``.
    """

    application_type_options = APPLICATION_TYPE_OPTIONS
    relationship_options = RELATIONSHIP_OPTIONS
    home_type_options = HOME_TYPE_OPTIONS

    def __init__(
        self,
        service: DataService,
        presenter: Presenter,
        definition: WizardDefinition | None = None,
        wizards_dir: str | Path | None = None,
        wizard_id: str = DEFAULT_WIZARD_ID,
    ) -> None:
        self._service = service
        self._presenter = presenter
        if definition is None:
            wizards = load_wizards(wizards_dir)
            if wizard_id not in wizards:
                raise ValueError(f"Unknown wizard: {wizard_id!r}")
            definition = wizards[wizard_id]
        if not definition.steps:
            raise ValueError(f"Wizard {definition.id!r} has no steps")
        self.definition = definition

        self.is_submitting = False
        self.application_id: str | None = None
        self._reset()

    def _reset(self) -> None:
        self.current_step = self.definition.steps[0].id
        self.show_success = False
        self.error_message = ""
        self.primary_applicant = PrimaryApplicant()
        self.household_info = HouseholdDraft()
        self.family_members: list[FamilyMemberDraft] = []
        self.current_member = FamilyMemberDraft()

    # -- derived --

    @property
    def is_caseworker(self) -> bool:
        return self.primary_applicant.application_type == ApplicationType.CASEWORKER

    @property
    def is_step1(self) -> bool:
        return self.current_step == WizardStep.STEP1

    @property
    def is_step2(self) -> bool:
        return self.current_step == WizardStep.STEP2

    @property
    def is_step3(self) -> bool:
        return self.current_step == WizardStep.STEP3

    @property
    def is_step4(self) -> bool:
        return self.current_step == WizardStep.STEP4

    @property
    def has_family_members(self) -> bool:
        return bool(self.family_members)

    @property
    def has_pets_label(self) -> str:
        return "Yes" if self.household_info.has_pets else "No"

    @property
    def current_step_definition(self) -> StepDefinition:
        return self.definition.steps[self._step_index()]

    # -- field edits --

    def change_applicant_field(self, field: str, value: Any) -> None:
        name = resolve_field(PrimaryApplicant, field)
        previous = self.primary_applicant.application_type
        self.primary_applicant = patch(self.primary_applicant, name, value)
        # A new role invalidates any step index reached under the old one.
        if name == "application_type" and self.primary_applicant.application_type != previous:
            self.current_step = WizardStep.STEP1

    def change_household_field(self, field: str, value: Any) -> None:
        self.household_info = patch(self.household_info, field, value)

    def change_member_field(self, field: str, value: Any) -> None:
        self.current_member = patch(self.current_member, field, value)

    # -- family members --

    def add_family_member(self) -> bool:
        result = validate_required_fields(self.current_member, ("first_name", "last_name"))
        if not result.valid:
            self._presenter.notify("Error", "Please enter first and last name", Severity.ERROR)
            return False
        member = self.current_member.model_copy(update={"temp_id": uuid.uuid4().hex})
        self.family_members = [*self.family_members, member]
        self.current_member = FamilyMemberDraft()
        self._presenter.notify("Success", "Family member added", Severity.SUCCESS)
        return True

    def remove_family_member(self, index: int) -> bool:
        if not 0 <= index < len(self.family_members):
            return False
        self.family_members = [m for i, m in enumerate(self.family_members) if i != index]
        self._presenter.notify("Success", "Family member removed", Severity.SUCCESS)
        return True

    # -- navigation --

    def next(self) -> bool:
        """Validate the current step and advance to the next applicable one.

        Returns False if validation failed.
        """
        step = self.current_step_definition
        if step.required_fields:
            result = validate_required_fields(self._form_data(), step.required_fields)
            if not result.valid:
                self.error_message = "Please fill in all required fields"
                return False

        index = self._step_index() + 1
        while index < len(self.definition.steps) and self._should_skip(self.definition.steps[index]):
            index += 1
        if index < len(self.definition.steps):
            self.current_step = self.definition.steps[index].id
        self._after_transition()
        return True

    def previous(self) -> None:
        """Return to the previous applicable step."""
        index = self._step_index() - 1
        while index >= 0 and self._should_skip(self.definition.steps[index]):
            index -= 1
        if index >= 0:
            self.current_step = self.definition.steps[index].id
        self._after_transition()

    def _after_transition(self) -> None:
        self.error_message = ""
        self._presenter.scroll_to_top()

    def _step_index(self) -> int:
        for i, step in enumerate(self.definition.steps):
            if step.id == self.current_step:
                return i
        raise ValueError(f"Step {self.current_step!r} is not part of {self.definition.id!r}")

    def _form_data(self) -> dict[str, Any]:
        return {**self.household_info.model_dump(), **self.primary_applicant.model_dump()}

    def _should_skip(self, step: StepDefinition) -> bool:
        """Evaluate a step's skip_if condition against the drafts."""
        if step.skip_if is None:
            return False
        field = step.skip_if.get("field")
        expected = step.skip_if.get("equals")
        if field and expected is not None:
            return self._form_data().get(field) == expected
        return False

    # -- submission --

    def build_payload(self) -> ApplicationPayload:
        if self.is_caseworker:
            return ApplicationPayload(primary_applicant=self.primary_applicant.model_copy())
        return ApplicationPayload(
            primary_applicant=self.primary_applicant.model_copy(),
            family_members=[m.model_copy() for m in self.family_members],
            household_info=self.household_info.to_wire(),
        )

    async def submit(self) -> bool:
        """Submit the application. Returns True on success."""
        if self.is_submitting or self.show_success:
            return False
        self.is_submitting = True
        self.error_message = ""
        try:
            self.application_id = await self._service.submit_application(self.build_payload())
            logger.info(
                "Submitted %s application %s",
                self.primary_applicant.application_type, self.application_id,
            )
            self.show_success = True
            self._presenter.notify(
                "Success", "Application submitted successfully!", Severity.SUCCESS,
            )
            self._presenter.scroll_to_top()
            return True
        except RemoteError as exc:
            logger.warning("Application submission failed: %s", error_message(exc))
            self.error_message = f"Error submitting application: {error_message(exc)}"
            self._presenter.notify("Error", self.error_message, Severity.ERROR)
            return False
        finally:
            self.is_submitting = False

    def new_application(self) -> None:
        """Discard every draft and start over at the first step."""
        self.application_id = None
        self._reset()
