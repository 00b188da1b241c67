"""Tests for aiopowerlink exception hierarchy."""

from aiopowerlink import (
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


def test_exception_hierarchy():
    """Verify inheritance design decisions that consumers depend on.

    - Transient failures (unreachable login, transport, repeated expiry)
      are all PowerLinkConnectionError, so callers can retry them later.
    - PowerLinkAuthError is NOT a connection error: it must never be
      retried.
    - Everything is catchable via ``except PowerLinkError``.
    """
    for cls in (
        PowerLinkAuthUnreachable,
        PowerLinkTransportError,
        PowerLinkSessionExpired,
    ):
        assert issubclass(cls, PowerLinkConnectionError), (
            f"{cls.__name__} should inherit PowerLinkConnectionError"
        )

    for cls in (PowerLinkAuthError, PowerLinkNotReady, PowerLinkUnsupportedTarget):
        assert not issubclass(cls, PowerLinkConnectionError), (
            f"{cls.__name__} should not inherit PowerLinkConnectionError"
        )

    # Login-unreachable is not a post-auth transport failure
    assert not issubclass(PowerLinkAuthUnreachable, PowerLinkTransportError)
    assert not issubclass(PowerLinkAuthUnreachable, PowerLinkAuthError)

    for cls in (PowerLinkUnsupportedTarget, PowerLinkConfigError):
        assert issubclass(cls, ValueError)

    for cls in (
        PowerLinkAuthError,
        PowerLinkAuthUnreachable,
        PowerLinkConnectionError,
        PowerLinkTransportError,
        PowerLinkSessionExpired,
        PowerLinkNotReady,
        PowerLinkUnsupportedTarget,
        PowerLinkConfigError,
    ):
        assert issubclass(cls, PowerLinkError), (
            f"{cls.__name__} should inherit PowerLinkError"
        )
