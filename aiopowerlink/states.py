"""Translation between raw panel states and canonical statuses."""

from __future__ import annotations

from collections.abc import Mapping

from .exceptions import PowerLinkUnsupportedTarget
from .models import Status


class StateMapper:
    """Table lookup between a protocol's vocabulary and Status."""

    def __init__(
        self,
        raw_to_status: Mapping[str, Status],
        status_to_command: Mapping[Status, str],
    ) -> None:
        """Initialize the mapper.

        Args:
            raw_to_status: Raw partition state strings to canonical status.
            status_to_command: Settable statuses to command strings.
        """
        self._raw_to_status = dict(raw_to_status)
        self._status_to_command = {
            status: command
            for status, command in status_to_command.items()
            if status.settable
        }

    def to_canonical(self, raw: object) -> Status:
        """Map a raw state string; anything unrecognized is UNKNOWN."""
        if not isinstance(raw, str):
            return Status.UNKNOWN
        return self._raw_to_status.get(raw, Status.UNKNOWN)

    def to_raw(self, status: Status | str) -> str:
        """Map a settable status to the protocol's command string.

        Raises:
            PowerLinkUnsupportedTarget: For EXIT_DELAY, UNKNOWN or any
                value without a command.
        """
        try:
            return self._status_to_command[Status(status)]
        except (KeyError, ValueError):
            raise PowerLinkUnsupportedTarget(
                f"Cannot set status to: {status}"
            ) from None
