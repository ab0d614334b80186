"""Family member collection editor with a single shared edit modal."""

from __future__ import annotations

import logging
from typing import Any

from fostercare.core.drafts import patch
from fostercare.core.errors import RemoteError, error_message
from fostercare.core.types import Severity
from fostercare.core.validation import validate_required_fields
from fostercare.members.models import (
    RELATIONSHIP_OPTIONS,
    REQUIRED_MEMBER_FIELDS,
    FamilyMember,
    PrimaryContactInfo,
)
from fostercare.notifications.service import Presenter
from fostercare.remote.client import DataService
from fostercare.remote.subscription import Subscription, SubscriptionResult

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this family member?"


class FamilyMemberEditor:
    """Add/edit/delete family members through one modal and one draft buffer.

    ``family_members`` is only ever replaced by a subscription delivery;
    ``current_member`` is the sole mutation target while the modal is open.
    At most one save or delete runs at a time, guarded by ``is_busy``.
    """

    relationship_options = RELATIONSHIP_OPTIONS

    def __init__(self, service: DataService, presenter: Presenter) -> None:
        self._service = service
        self._presenter = presenter
        self._members_sub: Subscription[list[FamilyMember]] | None = None
        self._contact_sub: Subscription[PrimaryContactInfo] | None = None

        self.family_members: list[FamilyMember] = []
        self.primary_contact_info: PrimaryContactInfo | None = None
        self.error_message = ""
        self.is_loading = True

        self.show_modal = False
        self.is_edit_mode = False
        self.current_member = FamilyMember()
        self.is_busy = False

    # -- lifecycle --

    async def mount(self) -> None:
        self._contact_sub = Subscription(
            self._service.fetch_primary_contact, self._on_primary_contact,
            name="primary_contact",
        )
        self._members_sub = Subscription(
            self._service.fetch_family_members, self._on_family_members,
            name="family_members",
        )
        await self._contact_sub.refresh()
        await self._members_sub.refresh()

    def unmount(self) -> None:
        for sub in (self._contact_sub, self._members_sub):
            if sub is not None:
                sub.close()
        self._contact_sub = None
        self._members_sub = None

    async def refresh(self) -> None:
        if self._members_sub is not None:
            await self._members_sub.refresh()

    def _on_primary_contact(self, result: SubscriptionResult[PrimaryContactInfo]) -> None:
        if result.data is not None:
            self.primary_contact_info = result.data
        elif result.error is not None:
            self._presenter.notify(
                "Error", "Error loading primary contact information", Severity.ERROR,
            )

    def _on_family_members(self, result: SubscriptionResult[list[FamilyMember]]) -> None:
        if result.data is not None:
            self.family_members = list(result.data)
            self.error_message = ""
        elif result.error is not None:
            self.error_message = f"Error loading family members: {error_message(result.error)}"
        self.is_loading = False

    # -- derived --

    @property
    def has_family_members(self) -> bool:
        return bool(self.family_members)

    @property
    def modal_title(self) -> str:
        return "Edit Family Member" if self.is_edit_mode else "Add Family Member"

    def find_member(self, member_id: str) -> FamilyMember | None:
        for member in self.family_members:
            if member.id == member_id:
                return member
        return None

    # -- modal --

    def open_add(self) -> None:
        self.is_edit_mode = False
        self.current_member = FamilyMember()
        self.show_modal = True

    def open_edit(self, member_id: str) -> None:
        member = self.find_member(member_id)
        if member is None:
            return
        self.is_edit_mode = True
        self.current_member = member.model_copy(deep=True)
        self.show_modal = True

    def change_field(self, field: str, value: Any) -> None:
        self.current_member = patch(self.current_member, field, value)

    def close_modal(self) -> None:
        self.show_modal = False
        self.current_member = FamilyMember()
        self.is_edit_mode = False

    # -- mutations --

    async def save_member(self) -> bool:
        """Create or update the draft. Returns True when the modal closed."""
        if self.is_busy:
            return False
        result = validate_required_fields(self.current_member, REQUIRED_MEMBER_FIELDS)
        if not result.valid:
            self._presenter.notify("Error", "Please fill in all required fields", Severity.ERROR)
            return False

        self.is_busy = True
        try:
            if self.is_edit_mode:
                await self._service.update_family_member(self.current_member)
                message = "Family member updated successfully"
            else:
                await self._service.create_family_member(self.current_member)
                message = "Family member added successfully"
            logger.info("%s: %s", message, self.current_member.full_name)
            self._presenter.notify("Success", message, Severity.SUCCESS)
            await self.refresh()
            self.close_modal()
            return True
        except RemoteError as exc:
            logger.warning("Saving family member failed: %s", error_message(exc))
            self._presenter.notify("Error", error_message(exc), Severity.ERROR)
            return False
        finally:
            self.is_busy = False

    async def delete_member(self, member_id: str) -> bool:
        """Delete after confirmation. Returns True when the member was deleted."""
        if self.is_busy:
            return False
        if not self._presenter.confirm(DELETE_CONFIRMATION):
            return False

        self.is_busy = True
        try:
            await self._service.delete_family_member(member_id)
            logger.info("Deleted family member %s", member_id)
            self._presenter.notify("Success", "Family member deleted successfully", Severity.SUCCESS)
            await self.refresh()
            return True
        except RemoteError as exc:
            logger.warning("Deleting family member %s failed: %s", member_id, error_message(exc))
            self._presenter.notify("Error", error_message(exc), Severity.ERROR)
            return False
        finally:
            self.is_busy = False
