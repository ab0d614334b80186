"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class RemoteConfig(BaseSettings):
    """Remote data service configuration."""

    model_config = {"env_prefix": "FOSTERCARE_REMOTE_"}

    provider: str = "memory"
    base_url: str = "http://localhost:8080/api"
    timeout_seconds: int = 30
    api_token: str | None = None


class IntakeConfig(BaseSettings):
    """Application wizard configuration."""

    model_config = {"env_prefix": "FOSTERCARE_INTAKE_"}

    wizards_dir: str | None = None
    wizard_id: str = "foster_application"


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "FOSTERCARE_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    intake: IntakeConfig = Field(default_factory=IntakeConfig)
