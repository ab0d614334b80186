"""Tests for config, error extraction, draft patching and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fostercare.core.config import Settings
from fostercare.core.drafts import patch, resolve_field
from fostercare.core.errors import UNKNOWN_ERROR_MESSAGE, RemoteError, error_message
from fostercare.core.validation import validate_fields, validate_required_fields
from fostercare.members.models import FamilyMember


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.remote.provider == "memory"
        assert settings.intake.wizard_id == "foster_application"
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FOSTERCARE_REMOTE_PROVIDER", "http")
        monkeypatch.setenv("FOSTERCARE_REMOTE_BASE_URL", "https://records.example.org/api")
        settings = Settings()
        assert settings.remote.provider == "http"
        assert settings.remote.base_url == "https://records.example.org/api"


class TestErrorMessage:
    def test_prefers_structured_body(self):
        err = RemoteError("Request failed", status_code=400, body={"message": "Invalid email"})
        assert error_message(err) == "Invalid email"

    def test_falls_back_to_message(self):
        assert error_message(RemoteError("Timed out")) == "Timed out"
        assert error_message(RuntimeError("plain")) == "plain"

    def test_plain_string(self):
        assert error_message("already a message") == "already a message"

    def test_unknown(self):
        assert error_message(RemoteError()) == UNKNOWN_ERROR_MESSAGE
        assert error_message(None) == UNKNOWN_ERROR_MESSAGE
        assert error_message(RemoteError("", body={"message": ""})) == UNKNOWN_ERROR_MESSAGE


class TestPatch:
    def test_returns_new_model(self):
        member = FamilyMember(first_name="Jo")
        updated = patch(member, "last_name", "Lee")
        assert updated is not member
        assert member.last_name == ""
        assert updated.first_name == "Jo"
        assert updated.last_name == "Lee"

    def test_accepts_wire_alias(self):
        assert resolve_field(FamilyMember, "mobilePhone") == "mobile_phone"
        assert patch(FamilyMember(), "homeStudyCompleted", True).home_study_completed is True

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="no field"):
            patch(FamilyMember(), "nickname", "J")

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            patch(FamilyMember(), "birthdate", "not-a-date")


class TestValidation:
    def test_required_fields(self):
        result = validate_required_fields(
            FamilyMember(first_name="Jo", last_name=" "), ("first_name", "last_name", "relationship"),
        )
        assert result.valid is False
        assert set(result.errors) == {"last_name", "relationship"}

    def test_all_present(self):
        result = validate_required_fields({"a": "x", "b": 0}, ["a", "b"])
        assert result.valid is True
        assert result.errors == {}

    def test_unknown_validator_ignored(self):
        assert validate_fields({"a": ""}, {"a": ["no_such_rule"]}).valid is True
