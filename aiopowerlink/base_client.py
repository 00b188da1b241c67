"""Base client for the PowerLink gateway API.

Wires the transport, authenticator, executor and retry policies together
and provides the debug-log hook. Operations live in PowerLinkClient.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from .auth import Authenticator
from .config import PowerLinkConfig
from .const import COMMAND_INITIAL_BACKOFF, POLL_INITIAL_BACKOFF, REAUTH_DELAY
from .exceptions import PowerLinkConfigError
from .executor import RequestExecutor
from .models import Request, Response
from .protocol import REVISION_3, REVISIONS, ProtocolRevision
from .retry import ReadinessRetryPolicy
from .transport import HttpTransport

_LOGGER = logging.getLogger(__name__)


class BasePowerLinkClient:
    """Async base client for one PowerLink gateway.

    Each instance owns its own credential store, so several clients can
    run side by side in one process without sharing sessions.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: PowerLinkConfig | dict[str, Any],
        *,
        revision: ProtocolRevision | str = REVISION_3,
        log: Callable[..., Any] | None = None,
        poll_policy: ReadinessRetryPolicy | None = None,
        command_policy: ReadinessRetryPolicy | None = None,
        reauth_delay: float = REAUTH_DELAY,
    ) -> None:
        """Initialize the client.

        Args:
            session: An aiohttp ClientSession for making HTTP requests.
                     Callers should manage the session lifecycle.
            config: Gateway settings, or a mapping for PowerLinkConfig.from_dict.
            revision: Protocol revision object or its name ("3.0", "4.0").
            log: printf-style logging function, only called when
                 config.debug is set. Defaults to this module's logger.
            poll_policy: Readiness retries for get_status.
            command_policy: Readiness retries for set_status.
            reauth_delay: Seconds to wait before replaying an expired call.

        Raises:
            PowerLinkConfigError: If the config does not suit the revision.
        """
        if not isinstance(config, PowerLinkConfig):
            config = PowerLinkConfig.from_dict(config)
        if isinstance(revision, str):
            if revision not in REVISIONS:
                raise PowerLinkConfigError(f"Unknown protocol revision: {revision}")
            revision = REVISIONS[revision]
        config.validate_for(revision)

        self._config = config
        self._revision = revision
        self._log = log or _LOGGER.info

        self._transport = HttpTransport(session, config.base_url, config.timeout)
        self._authenticator = Authenticator(
            self._transport, config, revision, log=self._debug_log
        )
        self._executor = RequestExecutor(
            self._transport,
            self._authenticator,
            revision.token_headers,
            session_expired_status=revision.session_expired_status,
            reauth_delay=reauth_delay,
            log=self._debug_log,
        )
        self._poll_policy = poll_policy or ReadinessRetryPolicy(
            initial_backoff=POLL_INITIAL_BACKOFF, log=self._debug_log
        )
        self._command_policy = command_policy or ReadinessRetryPolicy(
            initial_backoff=COMMAND_INITIAL_BACKOFF, log=self._debug_log
        )

    @property
    def config(self) -> PowerLinkConfig:
        """Return the gateway settings."""
        return self._config

    @property
    def revision(self) -> ProtocolRevision:
        """Return the protocol revision in use."""
        return self._revision

    @property
    def authenticated(self) -> bool:
        """Return True if a session credential is cached."""
        return self._authenticator.store.get() is not None

    @property
    def fail_safe(self) -> bool:
        """Return True if a rejected login has disabled authentication."""
        return self._authenticator.fail_safe

    def _debug_log(self, msg: str, *args: Any) -> None:
        """Send to the user's log function when debugging, else to DEBUG."""
        if self._config.debug:
            self._log(msg, *args)
        else:
            _LOGGER.debug(msg, *args)

    async def _request(self, request: Request) -> Response:
        """Execute a request with authentication and expiry recovery."""
        return await self._executor.execute(request)
