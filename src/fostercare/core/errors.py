"""Error types raised by the remote layer and message extraction helpers."""

from __future__ import annotations

from typing import Any

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class RemoteError(Exception):
    """A remote call failed.

    Attributes:
        message: Human-readable description.
        status_code: HTTP-style status, if the failure came from a response.
        body: Structured error body returned by the service, if any.
    """

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def error_message(error: BaseException | str | None) -> str:
    """Extract the most specific message available from an error."""
    if isinstance(error, str):
        return error or UNKNOWN_ERROR_MESSAGE
    body = getattr(error, "body", None)
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    message = getattr(error, "message", None) or (str(error) if error is not None else "")
    if message:
        return message
    return UNKNOWN_ERROR_MESSAGE
