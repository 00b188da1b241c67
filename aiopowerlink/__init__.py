"""Async Python client for Visonic PowerLink3 alarm gateways."""

__version__ = "0.1.0"

import logging


def enable_debug_logging() -> None:
    """Enable DEBUG logging for the aiopowerlink library.

    Sets the root 'aiopowerlink' logger to DEBUG so all modules
    (auth, executor, retry, etc.) emit debug output. Callers can also
    do this manually: logging.getLogger("aiopowerlink").setLevel(logging.DEBUG)
    """
    logging.getLogger(__name__).setLevel(logging.DEBUG)


from .auth import Authenticator, CredentialStore
from .base_client import BasePowerLinkClient
from .client import PowerLinkClient
from .config import PowerLinkConfig
from .exceptions import (
    PowerLinkAuthError,
    PowerLinkAuthUnreachable,
    PowerLinkConfigError,
    PowerLinkConnectionError,
    PowerLinkError,
    PowerLinkNotReady,
    PowerLinkSessionExpired,
    PowerLinkTransportError,
    PowerLinkUnsupportedTarget,
)
from .executor import RequestExecutor
from .models import Credential, PanelState, Request, Response, Status
from .protocol import REVISION_3, REVISION_4, LoginStep, ProtocolRevision
from .retry import ReadinessRetryPolicy, RetryState
from .states import StateMapper

__all__ = [
    "Authenticator",
    "BasePowerLinkClient",
    "Credential",
    "CredentialStore",
    "enable_debug_logging",
    "LoginStep",
    "PanelState",
    "PowerLinkAuthError",
    "PowerLinkAuthUnreachable",
    "PowerLinkClient",
    "PowerLinkConfig",
    "PowerLinkConfigError",
    "PowerLinkConnectionError",
    "PowerLinkError",
    "PowerLinkNotReady",
    "PowerLinkSessionExpired",
    "PowerLinkTransportError",
    "PowerLinkUnsupportedTarget",
    "ProtocolRevision",
    "ReadinessRetryPolicy",
    "Request",
    "RequestExecutor",
    "Response",
    "RetryState",
    "REVISION_3",
    "REVISION_4",
    "StateMapper",
    "Status",
]
