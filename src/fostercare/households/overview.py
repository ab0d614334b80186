"""Household overview reader with the caseworker assignment workflow."""

from __future__ import annotations

import logging

from fostercare.core.errors import RemoteError, error_message
from fostercare.core.types import Icon, SelectOption, Severity
from fostercare.households.models import (
    CaseworkerCandidate,
    ContactView,
    OverviewProjection,
    OverviewViewModel,
)
from fostercare.notifications.service import Presenter
from fostercare.remote.client import DataService
from fostercare.remote.subscription import Subscription, SubscriptionResult

logger = logging.getLogger(__name__)


def build_view_model(projection: OverviewProjection) -> OverviewViewModel:
    """Derive the presentation view-model from a delivered projection.

    Works on a deep copy; the projection itself is never touched.
    """
    data = projection.model_copy(deep=True)
    return OverviewViewModel(
        account_id=data.account_id,
        household_info=data.household_info,
        contacts=[ContactView.from_contact(c) for c in data.contacts],
        primary_caseworker_id=data.primary_caseworker_id,
    )


class OverviewReader:
    """Household overview bound to one account record.

    The view-model and the delivery error are mutually exclusive. The
    assignment workflow holds its candidates only while its modal is open.
    """

    def __init__(self, service: DataService, presenter: Presenter, account_id: str) -> None:
        self._service = service
        self._presenter = presenter
        self.account_id = account_id
        self._subscription: Subscription[OverviewProjection] | None = None

        self.overview: OverviewViewModel | None = None
        self.error: RemoteError | None = None
        self.is_loading = True

        self.show_caseworker_modal = False
        self.available_caseworkers: list[CaseworkerCandidate] = []
        self.selected_caseworker_id: str | None = None
        self.is_loading_caseworkers = False
        self.is_saving_caseworker = False

    # -- lifecycle --

    async def mount(self) -> None:
        self._subscription = Subscription(
            lambda: self._service.fetch_overview(self.account_id),
            self._on_overview,
            name=f"overview:{self.account_id}",
        )
        await self._subscription.refresh()

    def unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    async def refresh(self) -> None:
        if self._subscription is not None:
            await self._subscription.refresh()

    def _on_overview(self, result: SubscriptionResult[OverviewProjection]) -> None:
        if result.data is not None:
            self.overview = build_view_model(result.data)
            self.error = None
        elif result.error is not None:
            self.error = result.error
            self.overview = None
        self.is_loading = False

    # -- derived --

    @property
    def error_text(self) -> str | None:
        return error_message(self.error) if self.error is not None else None

    @property
    def household_safety_icon(self) -> Icon:
        if self.overview is None:
            return Icon.CLOSE
        return self.overview.household_safety_icon

    @property
    def caseworker_options(self) -> list[SelectOption]:
        return [
            SelectOption(label=cw.option_label, value=cw.id)
            for cw in self.available_caseworkers
        ]

    @property
    def selected_caseworker(self) -> CaseworkerCandidate | None:
        if not self.selected_caseworker_id:
            return None
        for cw in self.available_caseworkers:
            if cw.id == self.selected_caseworker_id:
                return cw
        return None

    # -- assignment workflow --

    async def open_assignment(self) -> None:
        """Open the modal and load candidates, preselecting the current assignee."""
        if self.is_loading_caseworkers:
            return
        self.show_caseworker_modal = True
        self.is_loading_caseworkers = True
        try:
            self.available_caseworkers = await self._service.fetch_candidates()
            if self.overview is not None and self.overview.primary_caseworker_id:
                self.selected_caseworker_id = self.overview.primary_caseworker_id
        except RemoteError as exc:
            logger.warning("Loading caseworkers failed: %s", error_message(exc))
            self._presenter.notify(
                "Error", f"Error loading caseworkers: {error_message(exc)}", Severity.ERROR,
            )
        finally:
            self.is_loading_caseworkers = False

    def select_caseworker(self, caseworker_id: str | None) -> None:
        self.selected_caseworker_id = caseworker_id

    def close_assignment(self) -> None:
        self.show_caseworker_modal = False
        self.selected_caseworker_id = None
        self.available_caseworkers = []

    async def save_assignment(self) -> bool:
        """Assign the selected caseworker. Returns True on success."""
        if self.is_saving_caseworker:
            return False
        if not self.selected_caseworker_id:
            self._presenter.notify("Error", "Please select a caseworker", Severity.ERROR)
            return False

        self.is_saving_caseworker = True
        try:
            await self._service.assign_caseworker(self.account_id, self.selected_caseworker_id)
            logger.info(
                "Assigned caseworker %s to account %s",
                self.selected_caseworker_id, self.account_id,
            )
            self._presenter.notify("Success", "Caseworker assigned successfully", Severity.SUCCESS)
            await self.refresh()
            self.close_assignment()
            return True
        except RemoteError as exc:
            logger.warning("Caseworker assignment failed: %s", error_message(exc))
            self._presenter.notify("Error", error_message(exc), Severity.ERROR)
            return False
        finally:
            self.is_saving_caseworker = False
