"""HTTP plumbing: one request/response round trip against the gateway."""

from __future__ import annotations

import logging

import aiohttp

from .exceptions import PowerLinkTransportError
from .models import Request, Response

_LOGGER = logging.getLogger(__name__)


class HttpTransport:
    """Send Request descriptions through an aiohttp session.

    Only network-level failures raise here. Any HTTP status, including
    errors, comes back as a Response for the caller to classify.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        timeout: float,
    ) -> None:
        """Initialize the transport.

        Args:
            session: An aiohttp ClientSession for making HTTP requests.
                     Callers should manage the session lifecycle.
            base_url: Gateway origin every request path is appended to.
            timeout: Total per-call timeout in seconds.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def send(self, request: Request) -> Response:
        """Perform the HTTP call.

        Raises:
            PowerLinkTransportError: On connection errors and timeouts.
        """
        url = f"{self._base_url}{request.path}"
        _LOGGER.debug("API %s %s", request.method, request.path)

        try:
            async with self._session.request(
                request.method,
                url,
                params=request.params,
                json=request.json,
                data=request.data,
                headers=dict(request.headers),
                timeout=self._timeout,
            ) as resp:
                body = await resp.text()
                _LOGGER.debug(
                    "API %s %s -> %d", request.method, request.path, resp.status
                )
                return Response(status=resp.status, body=body)

        except TimeoutError as err:
            _LOGGER.debug("API timeout %s %s", request.method, request.path)
            raise PowerLinkTransportError(
                f"Timeout calling {request.path}"
            ) from err
        except aiohttp.ClientError as err:
            _LOGGER.debug(
                "API connection error %s %s: %s", request.method, request.path, err
            )
            raise PowerLinkTransportError(f"Connection error: {err}") from err
        except Exception as err:
            _LOGGER.debug(
                "API unexpected error %s %s: %s", request.method, request.path, err
            )
            raise PowerLinkTransportError(f"Unexpected error: {err}") from err
