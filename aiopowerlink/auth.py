"""Session credential caching and single-flight login."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from .config import PowerLinkConfig
from .exceptions import (
    PowerLinkAuthError,
    PowerLinkAuthUnreachable,
    PowerLinkTransportError,
)
from .models import Credential, Response
from .protocol import LoginStep, ProtocolRevision
from .transport import HttpTransport

_LOGGER = logging.getLogger(__name__)


class CredentialStore:
    """Current credential plus the one-way fail-safe flag.

    Holds no lock of its own; the Authenticator is its only writer.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._credential: Credential | None = None
        self._fail_safe = False

    @property
    def fail_safe(self) -> bool:
        """Return True once a login has been definitively rejected."""
        return self._fail_safe

    def get(self) -> Credential | None:
        """Return the cached credential, if any."""
        return self._credential

    def set(self, credential: Credential) -> None:
        """Replace the cached credential."""
        self._credential = credential

    def clear(self) -> None:
        """Forget the cached credential."""
        self._credential = None

    def trip_fail_safe(self) -> None:
        """Block all future logins for the lifetime of this store."""
        self._fail_safe = True
        self._credential = None


class Authenticator:
    """Produce a valid credential, logging in at most once at a time.

    Concurrent callers that find no cached credential all wait on the same
    acquisition task and share its result or its exception.
    """

    def __init__(
        self,
        transport: HttpTransport,
        config: PowerLinkConfig,
        revision: ProtocolRevision,
        store: CredentialStore | None = None,
        log: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            transport: Transport used for the login calls.
            config: Gateway identifiers sent in the login payloads.
            revision: Protocol revision describing the login chain.
            store: Credential store to own; a fresh one by default.
            log: printf-style debug hook.
        """
        self._transport = transport
        self._config = config
        self._revision = revision
        self._store = store if store is not None else CredentialStore()
        self._log = log or _LOGGER.debug
        self._pending: asyncio.Task[Credential] | None = None

    @property
    def store(self) -> CredentialStore:
        """Return the credential store."""
        return self._store

    @property
    def fail_safe(self) -> bool:
        """Return True if logins are permanently blocked."""
        return self._store.fail_safe

    async def ensure_credential(self) -> Credential:
        """Return the cached credential, logging in first if needed.

        Raises:
            PowerLinkAuthError: If a login was ever rejected by the gateway.
            PowerLinkAuthUnreachable: If the login calls failed transiently.
        """
        if self._store.fail_safe:
            raise PowerLinkAuthError(
                "A previous authentication attempt failed; not continuing"
            )

        credential = self._store.get()
        if credential is not None:
            return credential

        if self._pending is None or self._pending.done():
            self._pending = asyncio.create_task(self._acquire())
            self._pending.add_done_callback(self._acquisition_done)
        else:
            self._log("Login already in progress, waiting for it")

        # A cancelled waiter must not cancel the login other callers share.
        return await asyncio.shield(self._pending)

    def invalidate(self, credential: Credential) -> None:
        """Drop the credential if it is still the cached one.

        A stale rejection must not discard a newer credential that a
        concurrent caller has already obtained.
        """
        if self._store.get() is credential:
            self._log("Session token is no longer valid, discarding it")
            self._store.clear()

    def _acquisition_done(self, task: asyncio.Task[Credential]) -> None:
        if self._pending is task:
            self._pending = None
        if not task.cancelled():
            # Mark the exception retrieved when every waiter has gone away.
            task.exception()

    async def _acquire(self) -> Credential:
        tokens: list[str] = []
        for step in self._revision.login_steps:
            request = step.build(self._config)
            if tokens:
                request = request.with_headers(
                    Credential(tuple(tokens)).headers(self._revision.token_headers)
                )
            try:
                response = await self._transport.send(request)
            except PowerLinkTransportError as err:
                raise PowerLinkAuthUnreachable(
                    f"Failed to get authentication session-token: {err}"
                ) from err
            tokens.append(self._read_token(step, response))

        credential = Credential(tuple(tokens))
        self._store.set(credential)
        self._log("Got session-token (%d login step(s))", len(tokens))
        return credential

    def _read_token(self, step: LoginStep, response: Response) -> str:
        """Extract the step's token, classifying failures.

        An explicit ``error`` field is a definitive rejection and trips the
        fail-safe. Anything else that goes wrong is transient.
        """
        self._log(
            "Response from login call: status=%d body=%s",
            response.status,
            response.body,
        )
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("error") is not None:
            message = body.get("error_message") or body["error"]
            _LOGGER.warning(
                "Login rejected by gateway (%s); further logins are disabled",
                message,
            )
            self._store.trip_fail_safe()
            raise PowerLinkAuthError(
                f"Failed to get authentication session-token: {message}"
            )

        if response.status >= 400:
            raise PowerLinkAuthUnreachable(
                f"Failed to get authentication session-token: HTTP {response.status}"
            )

        if not isinstance(body, dict) or not body.get(step.token_field):
            raise PowerLinkAuthUnreachable(
                "Failed to get authentication session-token: "
                f"malformed response (no {step.token_field})"
            )
        return str(body[step.token_field])
