"""Exceptions for the aiopowerlink library."""

from typing import Any


class PowerLinkError(Exception):
    """Base exception for PowerLink errors."""


class PowerLinkAuthError(PowerLinkError):
    """Authentication was definitively rejected by the gateway.

    Once raised, the client refuses every further login attempt so the
    account is not locked out by repeated bad credentials.
    """


class PowerLinkConnectionError(PowerLinkError):
    """Transient network or API failure."""


class PowerLinkAuthUnreachable(PowerLinkConnectionError):
    """The login endpoint could not be reached or answered garbage."""


class PowerLinkTransportError(PowerLinkConnectionError):
    """An authenticated request failed at the transport or HTTP level."""


class PowerLinkSessionExpired(PowerLinkTransportError):
    """The gateway rejected a freshly acquired session token."""


class PowerLinkNotReady(PowerLinkError):
    """The gateway is not yet connected to the alarm panel.

    When raised by a readiness retry run, ``attempt`` holds the final
    RetryAttempt (number of attempts, last delay, EXHAUSTED state).
    """

    attempt: Any = None


class PowerLinkUnsupportedTarget(PowerLinkError, ValueError):
    """The requested status can only be observed, not set."""


class PowerLinkConfigError(PowerLinkError, ValueError):
    """Invalid or incomplete client configuration."""
