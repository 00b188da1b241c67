"""Alarm status operations for the PowerLink gateway API."""

from __future__ import annotations

import logging

from .base_client import BasePowerLinkClient
from .exceptions import PowerLinkNotReady, PowerLinkTransportError
from .models import PanelState, Response, Status

_LOGGER = logging.getLogger(__name__)


class PowerLinkClient(BasePowerLinkClient):
    """Get and set the status of a Visonic alarm via its PowerLink module."""

    _last_status: Status | None = None

    @property
    def last_status(self) -> Status | None:
        """Return the status seen by the last successful get_status()."""
        return self._last_status

    async def get_status(self) -> Status:
        """Poll the panel and return its canonical status.

        Raises:
            PowerLinkNotReady: If the panel stayed disconnected for every
                allowed attempt.
            PowerLinkAuthError: If authentication is blocked.
            PowerLinkConnectionError: On transient login or request failures.
        """
        request = self._revision.status_request(self._config)
        panel = await self._poll_policy.run(
            lambda: self._request(request), self._interpret_status
        )
        status = self._revision.states.to_canonical(panel.raw_state)
        if status is Status.UNKNOWN:
            _LOGGER.debug("Unrecognized panel state: %s", panel.raw_state)
        self._last_status = status
        return status

    async def set_status(self, status: Status | str) -> None:
        """Arm or disarm the system.

        Args:
            status: DISARMED, ARMED_HOME or ARMED_AWAY.

        Raises:
            PowerLinkUnsupportedTarget: For any other status; nothing is
                sent to the gateway.
            PowerLinkNotReady: If the panel stayed disconnected for every
                allowed attempt.
        """
        command = self._revision.states.to_raw(status)
        request = self._revision.command_request(self._config, command)
        self._debug_log("Setting status to %s (%s)", status, command)
        await self._command_policy.run(
            lambda: self._request(request), self._interpret_command
        )

    def _interpret_status(self, response: Response) -> PanelState:
        self._debug_log("Response from status call: %s", response.body)
        try:
            panel = self._revision.parse_status(response.json())
        except (ValueError, KeyError, TypeError, AttributeError, IndexError) as err:
            raise PowerLinkTransportError(
                f"Malformed status response: {err!r}"
            ) from err
        if not panel.connected:
            raise PowerLinkNotReady("Panel not yet connected")
        return panel

    def _interpret_command(self, response: Response) -> None:
        self._debug_log("Got setStatus HTTP response body: %s", response.body)
        try:
            body = response.json()
        except ValueError:
            body = response.body
        if not self._revision.command_ready(body):
            raise PowerLinkNotReady("Panel not yet connected")
