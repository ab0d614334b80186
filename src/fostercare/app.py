"""Application wiring: settings, data service, presenter and components."""

from __future__ import annotations

import logging

from fostercare.core.config import Settings
from fostercare.households.overview import OverviewReader
from fostercare.intake.wizard import ApplicationWizard, load_wizards
from fostercare.members.editor import FamilyMemberEditor
from fostercare.notifications.service import Presenter, RecordingPresenter
from fostercare.remote.client import DataService, create_data_service


class CaseManagementApp:
    """Holds the shared collaborators and builds components on demand."""

    def __init__(self, settings: Settings, service: DataService, presenter: Presenter) -> None:
        self.settings = settings
        self.service = service
        self.presenter = presenter
        self.wizards = load_wizards(settings.intake.wizards_dir)

    async def overview_reader(self, account_id: str) -> OverviewReader:
        reader = OverviewReader(self.service, self.presenter, account_id)
        await reader.mount()
        return reader

    async def member_editor(self) -> FamilyMemberEditor:
        editor = FamilyMemberEditor(self.service, self.presenter)
        await editor.mount()
        return editor

    def application_wizard(self, wizard_id: str | None = None) -> ApplicationWizard:
        wizard_id = wizard_id or self.settings.intake.wizard_id
        if wizard_id not in self.wizards:
            raise ValueError(f"Unknown wizard: {wizard_id!r}")
        return ApplicationWizard(self.service, self.presenter, definition=self.wizards[wizard_id])

    async def close(self) -> None:
        await self.service.close()


def create_app(
    settings: Settings | None = None,
    service: DataService | None = None,
    presenter: Presenter | None = None,
) -> CaseManagementApp:
    """Create the application.

    Args:
        settings: Application settings. Defaults to Settings().
        service: Data service override. Defaults to the configured provider.
        presenter: UI presenter. Defaults to a RecordingPresenter.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("fostercare").setLevel(
        logging.DEBUG if settings.debug else settings.log_level.upper()
    )

    if service is None:
        service = create_data_service(settings.remote)
    if presenter is None:
        presenter = RecordingPresenter()

    return CaseManagementApp(settings, service, presenter)
