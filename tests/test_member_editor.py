"""Tests for the family member collection editor."""

from __future__ import annotations

from datetime import date

import pytest

from fostercare.core.types import Severity
from fostercare.members.editor import DELETE_CONFIRMATION, FamilyMemberEditor
from fostercare.members.models import FamilyMember


@pytest.fixture
def editor(service, presenter):
    return FamilyMemberEditor(service, presenter)


def _fill(editor, **fields):
    for field, value in fields.items():
        editor.change_field(field, value)


class TestLoading:
    def test_loading_until_first_delivery(self, editor):
        assert editor.is_loading is True

    @pytest.mark.asyncio
    async def test_mount_loads_members_and_primary_contact(self, editor):
        await editor.mount()
        assert editor.is_loading is False
        assert editor.has_family_members is True
        assert [m.id for m in editor.family_members] == ["003-SAM"]
        assert editor.primary_contact_info.first_name == "Dana"
        assert editor.error_message == ""

    @pytest.mark.asyncio
    async def test_members_error_sets_message(self, service, editor):
        service.fail("fetch_family_members", "No access")
        await editor.mount()
        assert editor.is_loading is False
        assert editor.error_message == "Error loading family members: No access"

    @pytest.mark.asyncio
    async def test_primary_contact_error_notifies(self, service, presenter, editor):
        service.set_primary_contact(None)
        await editor.mount()
        assert editor.primary_contact_info is None
        errors = presenter.store.list_by_severity(Severity.ERROR)
        assert [n.message for n in errors] == ["Error loading primary contact information"]


class TestModal:
    @pytest.mark.asyncio
    async def test_open_add_resets_draft(self, editor):
        await editor.mount()
        editor.open_edit("003-SAM")
        editor.open_add()
        assert editor.show_modal is True
        assert editor.is_edit_mode is False
        assert editor.modal_title == "Add Family Member"
        assert editor.current_member == FamilyMember()
        assert editor.current_member.background_check_status == "Pending"

    @pytest.mark.asyncio
    async def test_open_edit_copies_item(self, editor):
        await editor.mount()
        editor.open_edit("003-SAM")
        assert editor.is_edit_mode is True
        assert editor.modal_title == "Edit Family Member"
        assert editor.current_member == editor.family_members[0]
        assert editor.current_member is not editor.family_members[0]

    @pytest.mark.asyncio
    async def test_open_edit_unknown_id_is_noop(self, editor):
        await editor.mount()
        editor.open_edit("003-NOPE")
        assert editor.show_modal is False

    @pytest.mark.asyncio
    async def test_cancel_edit_leaves_item_unchanged(self, editor):
        await editor.mount()
        original = editor.family_members[0].model_copy()
        editor.open_edit("003-SAM")
        _fill(editor, first_name="Samuel", relationship="Partner")
        editor.close_modal()
        assert editor.family_members[0] == original
        assert editor.show_modal is False
        assert editor.current_member == FamilyMember()

    @pytest.mark.asyncio
    async def test_field_change_replaces_draft(self, editor):
        await editor.mount()
        editor.open_add()
        before = editor.current_member
        editor.change_field("firstName", "Jo")
        editor.change_field("birthdate", "2001-02-03")
        assert before.first_name == ""
        assert editor.current_member is not before
        assert editor.current_member.first_name == "Jo"
        assert editor.current_member.birthdate == date(2001, 2, 3)

    def test_unknown_field_rejected(self, editor):
        with pytest.raises(ValueError):
            editor.change_field("shoeSize", 9)


class TestSave:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["first_name", "last_name", "relationship"])
    async def test_missing_required_field_blocks_save(self, service, presenter, editor, missing):
        await editor.mount()
        editor.open_add()
        fields = {"first_name": "Jo", "last_name": "Hartley", "relationship": "Child"}
        fields[missing] = "  "
        _fill(editor, **fields)
        assert await editor.save_member() is False
        assert "create_family_member" not in service.calls
        assert "update_family_member" not in service.calls
        assert editor.show_modal is True
        assert presenter.store.last.message == "Please fill in all required fields"

    @pytest.mark.asyncio
    async def test_create_refreshes_collection(self, service, presenter, editor):
        await editor.mount()
        editor.open_add()
        _fill(editor, first_name="Jo", last_name="Hartley", relationship="Child")

        seen = []
        service.observers["create_family_member"] = lambda: seen.append(editor.is_busy)
        assert await editor.save_member() is True

        assert seen == [True]
        assert editor.is_busy is False
        assert editor.show_modal is False
        assert [m.full_name for m in editor.family_members] == ["Sam Hartley", "Jo Hartley"]
        assert editor.family_members[1].id is not None
        assert presenter.store.last.message == "Family member added successfully"

    @pytest.mark.asyncio
    async def test_update_refreshes_collection(self, service, presenter, editor):
        await editor.mount()
        editor.open_edit("003-SAM")
        _fill(editor, training_completed=True)
        assert await editor.save_member() is True
        assert "update_family_member" in service.calls
        assert "create_family_member" not in service.calls
        assert editor.family_members[0].training_completed is True
        assert presenter.store.last.message == "Family member updated successfully"

    @pytest.mark.asyncio
    async def test_failure_keeps_modal_open(self, service, presenter, editor):
        await editor.mount()
        editor.open_edit("003-SAM")
        service.fail("update_family_member", "Record locked")
        assert await editor.save_member() is False
        assert editor.is_busy is False
        assert editor.show_modal is True
        assert editor.is_edit_mode is True
        assert presenter.store.last.severity == Severity.ERROR
        assert presenter.store.last.message == "Record locked"

        del service.failures["update_family_member"]
        assert await editor.save_member() is True

    @pytest.mark.asyncio
    async def test_busy_blocks_further_mutations(self, service, editor):
        await editor.mount()
        editor.open_add()
        _fill(editor, first_name="Jo", last_name="Hartley", relationship="Child")
        editor.is_busy = True
        assert await editor.save_member() is False
        assert await editor.delete_member("003-SAM") is False
        assert "create_family_member" not in service.calls
        assert "delete_family_member" not in service.calls


class TestDelete:
    @pytest.mark.asyncio
    async def test_declined_confirmation_skips_call(self, service, presenter, editor):
        await editor.mount()
        presenter.confirm_answer = False
        assert await editor.delete_member("003-SAM") is False
        assert presenter.prompts == [DELETE_CONFIRMATION]
        assert "delete_family_member" not in service.calls
        assert editor.has_family_members is True

    @pytest.mark.asyncio
    async def test_confirmed_delete_refreshes(self, service, presenter, editor):
        await editor.mount()
        seen = []
        service.observers["delete_family_member"] = lambda: seen.append(editor.is_busy)
        assert await editor.delete_member("003-SAM") is True
        assert seen == [True]
        assert editor.is_busy is False
        assert editor.family_members == []
        assert editor.has_family_members is False
        assert presenter.store.last.message == "Family member deleted successfully"

    @pytest.mark.asyncio
    async def test_delete_failure(self, service, presenter, editor):
        await editor.mount()
        assert await editor.delete_member("003-GONE") is False
        assert editor.is_busy is False
        assert presenter.store.last.message == "Family member not found"
        assert len(editor.family_members) == 1
