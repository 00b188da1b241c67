"""Data models for the PowerLink API."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class Status(StrEnum):
    """Canonical alarm system status."""

    DISARMED = "disarmed"
    ARMED_HOME = "home"
    ARMED_AWAY = "away"
    # Observation only: the panel has begun arming and is letting people out.
    EXIT_DELAY = "exit delay"
    UNKNOWN = "unknown"

    @property
    def settable(self) -> bool:
        """Return True if the status can be requested via set_status."""
        return self in (Status.DISARMED, Status.ARMED_HOME, Status.ARMED_AWAY)


@dataclass(frozen=True)
class Credential:
    """Session token(s) proving the client is logged in to the gateway.

    Revision 3 holds a single session token. Revision 4 holds the account
    user token followed by the panel session token.
    """

    tokens: tuple[str, ...]

    def headers(self, names: Sequence[str]) -> dict[str, str]:
        """Map the tokens onto the header names the protocol expects."""
        return dict(zip(names, self.tokens))

    def __repr__(self) -> str:
        return f"Credential(tokens=<{len(self.tokens)} redacted>)"


@dataclass(frozen=True)
class Request:
    """Description of one HTTP call, relative to the gateway base URL."""

    method: str
    path: str
    params: Mapping[str, str] | None = None
    json: Any = None
    data: Mapping[str, str] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def with_headers(self, extra: Mapping[str, str]) -> Request:
        """Return a copy of this request with extra headers merged in."""
        return replace(self, headers={**self.headers, **extra})


@dataclass(frozen=True)
class Response:
    """Raw HTTP response: status code and body text."""

    status: int
    body: str

    def json(self) -> Any:  # noqa: ANN401
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)


@dataclass(frozen=True)
class PanelState:
    """Readiness and raw partition state parsed from a status body."""

    connected: bool
    raw_state: str | None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)
