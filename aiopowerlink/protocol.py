"""Wire-level description of the PowerLink REST API revisions.

Each revision says how to log in (one or more chained calls), which
headers carry the resulting tokens, how to poll and parse the panel
status, and how to send an arm/disarm command.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import PowerLinkConfig
from .const import (
    HEADER_SESSION_TOKEN,
    HEADER_USER_TOKEN,
    HTTP_STATUS_SESSION_EXPIRED,
    REASON_PANEL_NOT_CONNECTED,
    V3_COMMAND_ENDPOINT,
    V3_LOGIN_ENDPOINT,
    V3_STATUS_ENDPOINT,
    V4_AUTH_ENDPOINT,
    V4_PANEL_LOGIN_ENDPOINT,
    V4_SET_STATE_ENDPOINT,
    V4_STATUS_ENDPOINT,
)
from .models import PanelState, Request, Status
from .states import StateMapper


@dataclass(frozen=True)
class LoginStep:
    """One call of a login chain and the body field holding its token."""

    build: Callable[[PowerLinkConfig], Request]
    token_field: str


@dataclass(frozen=True)
class ProtocolRevision:
    """Everything the client needs to know about one API revision."""

    name: str
    login_steps: tuple[LoginStep, ...]
    token_headers: tuple[str, ...]
    required_fields: tuple[str, ...]
    status_request: Callable[[PowerLinkConfig], Request]
    parse_status: Callable[[Any], PanelState]
    command_request: Callable[[PowerLinkConfig, str], Request]
    command_ready: Callable[[Any], bool]
    states: StateMapper
    session_expired_status: int = HTTP_STATUS_SESSION_EXPIRED


def _first_partition_state(body: dict[str, Any]) -> str | None:
    partitions = body["partitions"]
    if not partitions:
        return None
    return partitions[0].get("state")


# ---- REST API 3.0 ----


def _v3_identity(config: PowerLinkConfig) -> dict[str, str]:
    return {
        "user_code": config.user_code or "",
        "app_type": config.app_type,
        "user_id": config.user_id or "",
        "panel_web_name": config.panel_web_name or "",
    }


def _v3_login(config: PowerLinkConfig) -> Request:
    return Request(
        "POST",
        V3_LOGIN_ENDPOINT,
        json=_v3_identity(config),
        headers={"Content-Type": "application/json"},
    )


def _v3_status(config: PowerLinkConfig) -> Request:
    return Request(
        "GET",
        V3_STATUS_ENDPOINT,
        params=_v3_identity(config),
        headers={"Content-Type": "application/json"},
    )


def _v3_parse_status(body: Any) -> PanelState:  # noqa: ANN401
    return PanelState(
        connected=body.get("is_connected") is True,
        raw_state=_first_partition_state(body),
        raw=body,
    )


def _v3_command(config: PowerLinkConfig, command: str) -> Request:
    return Request("POST", V3_COMMAND_ENDPOINT, data={"set": command})


def _v3_command_ready(body: Any) -> bool:  # noqa: ANN401
    # The ajax endpoint answers with a page fragment; only a JSON body
    # can say the panel is offline.
    if isinstance(body, dict):
        return body.get("is_connected", True) is not False
    return True


REVISION_3 = ProtocolRevision(
    name="3.0",
    login_steps=(LoginStep(_v3_login, "session_token"),),
    token_headers=(HEADER_SESSION_TOKEN,),
    required_fields=("user_code", "user_id", "panel_web_name"),
    status_request=_v3_status,
    parse_status=_v3_parse_status,
    command_request=_v3_command,
    command_ready=_v3_command_ready,
    states=StateMapper(
        {
            "Disarm": Status.DISARMED,
            "NotReady": Status.DISARMED,
            "Exit Delay": Status.EXIT_DELAY,
            "HOME": Status.ARMED_HOME,
            "AWAY": Status.ARMED_AWAY,
        },
        {
            Status.DISARMED: "Disarm",
            Status.ARMED_HOME: "ArmHome",
            Status.ARMED_AWAY: "ArmAway",
        },
    ),
)


# ---- REST API 4.0 ----


def _v4_auth(config: PowerLinkConfig) -> Request:
    return Request(
        "POST",
        V4_AUTH_ENDPOINT,
        json={
            "email": config.email,
            "password": config.password,
            "app_id": config.app_id,
        },
    )


def _v4_panel_login(config: PowerLinkConfig) -> Request:
    return Request(
        "POST",
        V4_PANEL_LOGIN_ENDPOINT,
        json={
            "user_code": config.user_code,
            "app_type": config.app_type,
            "app_id": config.app_id,
            "panel_serial": config.panel_serial,
        },
    )


def _v4_status(config: PowerLinkConfig) -> Request:
    return Request("GET", V4_STATUS_ENDPOINT)


def _v4_parse_status(body: Any) -> PanelState:  # noqa: ANN401
    return PanelState(
        connected=body.get("connected") is True,
        raw_state=_first_partition_state(body),
        raw=body,
    )


def _v4_command(config: PowerLinkConfig, command: str) -> Request:
    return Request(
        "POST",
        V4_SET_STATE_ENDPOINT,
        json={"partition": -1, "state": command},
    )


def _v4_command_ready(body: Any) -> bool:  # noqa: ANN401
    if isinstance(body, dict):
        return body.get("error_reason_code") != REASON_PANEL_NOT_CONNECTED
    return True


REVISION_4 = ProtocolRevision(
    name="4.0",
    login_steps=(
        LoginStep(_v4_auth, "user_token"),
        LoginStep(_v4_panel_login, "session_token"),
    ),
    token_headers=(HEADER_USER_TOKEN, HEADER_SESSION_TOKEN),
    required_fields=(
        "email",
        "password",
        "app_id",
        "user_code",
        "panel_serial",
    ),
    status_request=_v4_status,
    parse_status=_v4_parse_status,
    command_request=_v4_command,
    command_ready=_v4_command_ready,
    states=StateMapper(
        {
            "DISARM": Status.DISARMED,
            "HOME": Status.ARMED_HOME,
            "AWAY": Status.ARMED_AWAY,
            "EXIT": Status.EXIT_DELAY,
            "EXIT DELAY": Status.EXIT_DELAY,
        },
        {
            Status.DISARMED: "DISARM",
            Status.ARMED_HOME: "HOME",
            Status.ARMED_AWAY: "AWAY",
        },
    ),
)

REVISIONS = {revision.name: revision for revision in (REVISION_3, REVISION_4)}
