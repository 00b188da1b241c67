"""Connection settings for a PowerLink gateway."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from .const import DEFAULT_APP_TYPE, DEFAULT_SCHEME, DEFAULT_TIMEOUT
from .exceptions import PowerLinkConfigError

if TYPE_CHECKING:
    from .protocol import ProtocolRevision

# camelCase keys used by existing PowerLink3 configurations
_CAMEL_KEYS = {
    "userCode": "user_code",
    "appType": "app_type",
    "userId": "user_id",
    "panelWebName": "panel_web_name",
    "panelSerial": "panel_serial",
    "appId": "app_id",
}

# Keys only the original millisecond-timeout configuration format uses
_LEGACY_KEYS = frozenset({"userCode", "appType", "userId", "panelWebName"})


@dataclass(frozen=True)
class PowerLinkConfig:
    """Settings needed to talk to one PowerLink gateway.

    Which identifiers are required depends on the protocol revision:
    revision 3 logs in with the user code and panel web name, revision 4
    with an account email/password followed by the panel serial.
    """

    host: str
    user_code: str | None = None
    app_type: str = DEFAULT_APP_TYPE
    user_id: str | None = None
    panel_web_name: str | None = None
    email: str | None = None
    password: str | None = None
    app_id: str | None = None
    panel_serial: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False
    scheme: str = DEFAULT_SCHEME

    @property
    def base_url(self) -> str:
        """Return the gateway origin, e.g. https://192.168.1.20."""
        return f"{self.scheme}://{self.host}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PowerLinkConfig:
        """Create from a plain mapping.

        Accepts snake_case keys as well as the camelCase keys of older
        PowerLink3 configurations. A config in the original PowerLink3 format
        (userCode, userId, ...) gives its timeout in milliseconds.

        Raises:
            PowerLinkConfigError: If the host is missing or the timeout is
                not a number.
        """
        if not data.get("host"):
            raise PowerLinkConfigError("Config is missing 'host'")

        known = {f.name for f in fields(cls)}
        legacy = any(key in _LEGACY_KEYS for key in data)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value

        if "timeout" in kwargs:
            try:
                timeout = float(kwargs["timeout"])
            except (TypeError, ValueError):
                raise PowerLinkConfigError(
                    f"Timeout must be a number, got {kwargs['timeout']!r}"
                ) from None
            kwargs["timeout"] = timeout / 1000 if legacy else timeout
        if "debug" in kwargs:
            kwargs["debug"] = bool(kwargs["debug"])
        return cls(**kwargs)

    def validate_for(self, revision: ProtocolRevision) -> None:
        """Raise PowerLinkConfigError if the revision's login fields are unset."""
        missing = [name for name in revision.required_fields if not getattr(self, name)]
        if missing:
            raise PowerLinkConfigError(
                f"Protocol revision {revision.name} requires: {', '.join(missing)}"
            )
        if self.timeout <= 0:
            raise PowerLinkConfigError("Timeout must be positive")
