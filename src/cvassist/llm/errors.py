"""Error kinds surfaced by the assistant. Messages are meant to be shown to the end user."""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for every failure a generation call can end in."""

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(AssistantError):
    """No credential is available; raised before any network call."""


class RemoteServiceError(AssistantError):
    """The exchange with the remote service failed (status, transport or decode)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        status: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status = status


class MalformedResponseError(AssistantError):
    """A successful response did not carry the expected generated text."""
