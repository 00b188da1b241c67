"""Authenticated requests with one transparent re-login on session expiry."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .auth import Authenticator
from .const import HTTP_STATUS_SESSION_EXPIRED, REAUTH_DELAY
from .exceptions import PowerLinkSessionExpired, PowerLinkTransportError
from .models import Request, Response
from .transport import HttpTransport

_LOGGER = logging.getLogger(__name__)


class RequestExecutor:
    """Attach the current credential to a request and send it.

    If the gateway answers with the session-expired status, the credential
    is discarded and the request is replayed once with a fresh login. A
    second expiry in the same call is an error, never a loop.
    """

    def __init__(
        self,
        transport: HttpTransport,
        authenticator: Authenticator,
        token_headers: tuple[str, ...],
        *,
        session_expired_status: int = HTTP_STATUS_SESSION_EXPIRED,
        reauth_delay: float = REAUTH_DELAY,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        log: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            transport: Transport used for the HTTP calls.
            authenticator: Source of valid credentials.
            token_headers: Header names the credential tokens go into.
            session_expired_status: HTTP status meaning "log in again".
            reauth_delay: Seconds to wait before replaying an expired call.
            sleep: Delay primitive.
            log: printf-style debug hook.
        """
        self._transport = transport
        self._authenticator = authenticator
        self._token_headers = token_headers
        self._session_expired_status = session_expired_status
        self._reauth_delay = reauth_delay
        self._sleep = sleep
        self._log = log or _LOGGER.debug

    async def execute(self, request: Request) -> Response:
        """Send the request with credentials attached.

        Raises:
            PowerLinkAuthError: Login is blocked by the fail-safe.
            PowerLinkAuthUnreachable: Login failed transiently.
            PowerLinkSessionExpired: A fresh session was rejected too.
            PowerLinkTransportError: Network failure or HTTP error status.
        """
        for attempt in range(2):
            credential = await self._authenticator.ensure_credential()
            response = await self._transport.send(
                request.with_headers(credential.headers(self._token_headers))
            )

            if response.status != self._session_expired_status:
                break

            self._authenticator.invalidate(credential)
            if attempt:
                raise PowerLinkSessionExpired(
                    f"Session expired again after re-login calling {request.path}"
                )
            self._log(
                "Our session-token probably isn't valid anymore, "
                "getting another one for %s",
                request.path,
            )
            if self._reauth_delay > 0:
                await self._sleep(self._reauth_delay)

        if response.status >= 400:
            raise PowerLinkTransportError(
                f"Unexpected status {response.status} calling {request.path}"
            )
        return response
