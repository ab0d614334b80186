"""Data service backed by the agency's REST API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from fostercare.core.config import RemoteConfig
from fostercare.core.errors import RemoteError
from fostercare.households.models import CaseworkerCandidate, OverviewProjection
from fostercare.intake.models import ApplicationPayload
from fostercare.members.models import FamilyMember, PrimaryContactInfo
from fostercare.remote.client import DataService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpDataService(DataService):
    """Talks to the record service over JSON/HTTP. No automatic retries."""

    def __init__(self, config: RemoteConfig) -> None:
        self.config = config
        headers: dict[str, str] = {"Accept": "application/json"}
        if config.api_token:
            headers["Authorization"] = f"Bearer {config.api_token}"
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers=headers,
        )

    # -- public API ----------------------------------------------------------

    async def fetch_overview(self, account_id: str) -> OverviewProjection:
        data = await self._request("GET", f"/accounts/{account_id}/overview")
        return _decode(OverviewProjection, data)

    async def fetch_candidates(self) -> list[CaseworkerCandidate]:
        data = await self._request("GET", "/caseworkers/available")
        return _decode_list(CaseworkerCandidate, data)

    async def assign_caseworker(self, account_id: str, caseworker_id: str) -> None:
        await self._request(
            "POST", f"/accounts/{account_id}/caseworker",
            json={"caseworkerId": caseworker_id},
        )

    async def fetch_primary_contact(self) -> PrimaryContactInfo:
        data = await self._request("GET", "/family-members/primary-contact")
        return _decode(PrimaryContactInfo, data)

    async def fetch_family_members(self) -> list[FamilyMember]:
        data = await self._request("GET", "/family-members")
        return _decode_list(FamilyMember, data)

    async def create_family_member(self, member: FamilyMember) -> FamilyMember:
        data = await self._request("POST", "/family-members", json=member.to_wire())
        return _decode(FamilyMember, data)

    async def update_family_member(self, member: FamilyMember) -> FamilyMember:
        if not member.id:
            raise RemoteError("Cannot update a family member without an id")
        data = await self._request(
            "PUT", f"/family-members/{member.id}", json=member.to_wire(),
        )
        return _decode(FamilyMember, data)

    async def delete_family_member(self, member_id: str) -> None:
        await self._request("DELETE", f"/family-members/{member_id}")

    async def submit_application(self, payload: ApplicationPayload) -> str:
        data = await self._request("POST", "/applications", json=payload.to_wire())
        return str(data.get("id", "")) if isinstance(data, dict) else ""

    async def close(self) -> None:
        await self._http.aclose()

    # -- internal ------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Execute a request and return the decoded JSON body (None if empty).

        Raises:
            RemoteError: On transport failure or a non-2xx response.
        """
        try:
            resp = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Transport error on %s %s: %s", method, url, exc)
            raise RemoteError(str(exc) or type(exc).__name__) from exc

        if resp.is_error:
            body = _json_or_none(resp)
            logger.warning("%s %s returned %d", method, url, resp.status_code)
            raise RemoteError(
                f"Request failed with status {resp.status_code}",
                status_code=resp.status_code,
                body=body if isinstance(body, dict) else None,
            )
        if not resp.content:
            return None
        return _json_or_none(resp)


def _decode(model_cls: type[ModelT], data: Any) -> ModelT:
    """Validate a response body, reporting a malformed one as a RemoteError."""
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        logger.warning("Malformed %s in response: %s", model_cls.__name__, exc)
        raise RemoteError(f"Malformed response: expected {model_cls.__name__}") from exc


def _decode_list(model_cls: type[ModelT], data: Any) -> list[ModelT]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise RemoteError(f"Malformed response: expected a list of {model_cls.__name__}")
    return [_decode(model_cls, item) for item in data]


def _json_or_none(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None
