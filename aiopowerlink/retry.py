"""Bounded retries while the gateway is not yet connected to the panel."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from .const import (
    BACKOFF_MULTIPLIER,
    DEFAULT_MAX_ATTEMPTS,
    MAX_BACKOFF,
    POLL_INITIAL_BACKOFF,
)
from .exceptions import PowerLinkNotReady

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RetryState(Enum):
    """Lifecycle of one retried operation."""

    ATTEMPTING = "attempting"
    BACKING_OFF = "backing_off"
    EXHAUSTED = "exhausted"
    SUCCEEDED = "succeeded"


@dataclass
class RetryAttempt:
    """Progress of a single run(); never shared between calls."""

    number: int = 0
    delay: float = 0.0
    state: RetryState = RetryState.ATTEMPTING


@dataclass(frozen=True)
class ReadinessRetryPolicy:
    """Retry an execute-and-interpret cycle while the panel is not ready.

    Only PowerLinkNotReady is retried. Authentication and transport errors
    end the run at once. The policy keeps no per-call state, so one
    instance can serve any number of concurrent operations.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_backoff: float = POLL_INITIAL_BACKOFF
    max_backoff: float = MAX_BACKOFF
    multiplier: float = BACKOFF_MULTIPLIER
    sleep: Callable[[float], Awaitable[Any]] = field(
        default=asyncio.sleep, repr=False, compare=False
    )
    log: Callable[..., Any] | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def backoff_delay(self, retries: int) -> float:
        """Return the delay before retry number ``retries`` (0-based)."""
        delay: float = min(
            self.initial_backoff * (self.multiplier**retries),
            self.max_backoff,
        )
        return max(delay, 0.0)

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        interpret: Callable[[T], R],
    ) -> R:
        """Run operation and interpret its result until ready.

        Args:
            operation: Performs one request, e.g. an executor call.
            interpret: Turns the response into a result, raising
                PowerLinkNotReady while the panel is not connected.

        Raises:
            PowerLinkNotReady: If every allowed attempt was not ready.
        """
        log = self.log or _LOGGER.debug
        attempt = RetryAttempt()
        while True:
            attempt.number += 1
            attempt.state = RetryState.ATTEMPTING
            response = await operation()
            try:
                result = interpret(response)
            except PowerLinkNotReady as err:
                if attempt.number >= self.max_attempts:
                    attempt.state = RetryState.EXHAUSTED
                    err.attempt = attempt
                    log("Panel still not connected after %d attempts", attempt.number)
                    raise
                attempt.state = RetryState.BACKING_OFF
                attempt.delay = self.backoff_delay(attempt.number - 1)
                log(
                    "Panel not yet connected, retry %d/%d in %.1f seconds",
                    attempt.number,
                    self.max_attempts - 1,
                    attempt.delay,
                )
                await self.sleep(attempt.delay)
                continue

            attempt.state = RetryState.SUCCEEDED
            return result
