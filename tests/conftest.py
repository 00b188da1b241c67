"""Shared fixtures for aiopowerlink tests."""

import re
from unittest.mock import AsyncMock

import aiohttp
import pytest
from aioresponses import aioresponses

from aiopowerlink import (
    REVISION_4,
    PowerLinkClient,
    PowerLinkConfig,
    ReadinessRetryPolicy,
)

HOST = "192.168.1.20"
BASE = f"https://{HOST}"

# REST API 3.0
V3_LOGIN_URL = f"{BASE}/rest_api/3.0/login"
# Status carries the identity as query params; regex avoids param ordering.
V3_STATUS_URL = re.compile(re.escape(f"{BASE}/rest_api/3.0/status") + r"(\?.*)?$")
V3_COMMAND_URL = f"{BASE}/web/ajax/security.main.status.ajax.php"

# REST API 4.0
V4_AUTH_URL = f"{BASE}/rest_api/4.0/auth"
V4_PANEL_LOGIN_URL = f"{BASE}/rest_api/4.0/panel/login"
V4_STATUS_URL = f"{BASE}/rest_api/4.0/status"
V4_SET_STATE_URL = f"{BASE}/rest_api/4.0/set_state"

# ---------------------------------------------------------------------------
# Raw API response dicts
# ---------------------------------------------------------------------------

LOGIN_RESPONSE = {"session_token": "tok_abc123"}

LOGIN_REJECTED_RESPONSE = {
    "error": 10001,
    "error_message": "Wrong user code",
}

V4_AUTH_RESPONSE = {"user_token": "usr_001"}
V4_PANEL_LOGIN_RESPONSE = {"session_token": "ses_001"}


def v3_status(state="Disarm", connected=True):
    """Build a 3.0 status body."""
    return {
        "is_connected": connected,
        "exit_delay": 30,
        "partitions": [{"id": 1, "state": state, "ready_status": True}],
    }


def v4_status(state="DISARM", connected=True):
    """Build a 4.0 status body."""
    return {
        "connected": connected,
        "bba_connected": True,
        "partitions": [{"id": -1, "state": state, "status": ""}],
    }


CONFIG_V3 = {
    "host": HOST,
    "user_code": "1234",
    "user_id": "2d978962-daa6-4e18-a5e5-b4a99100bd3b",
    "panel_web_name": "123456",
}

CONFIG_V4 = {
    "host": HOST,
    "user_code": "1234",
    "email": "test@example.com",
    "password": "secret",
    "app_id": "app_001",
    "panel_serial": "ABC123",
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def aiohttp_session():
    """Provide an aiohttp ClientSession."""
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
def sleep():
    """Provide a delay primitive that returns immediately."""
    return AsyncMock()


@pytest.fixture
def config():
    """Provide a 3.0 gateway config."""
    return PowerLinkConfig.from_dict(CONFIG_V3)


@pytest.fixture
async def client(aiohttp_session, config, sleep):
    """Provide a 3.0 PowerLinkClient that never really sleeps."""
    return PowerLinkClient(
        aiohttp_session,
        config,
        poll_policy=ReadinessRetryPolicy(initial_backoff=3.0, sleep=sleep),
        command_policy=ReadinessRetryPolicy(initial_backoff=5.0, sleep=sleep),
        reauth_delay=0,
    )


@pytest.fixture
async def client_v4(aiohttp_session, sleep):
    """Provide a 4.0 PowerLinkClient that never really sleeps."""
    return PowerLinkClient(
        aiohttp_session,
        PowerLinkConfig.from_dict(CONFIG_V4),
        revision=REVISION_4,
        poll_policy=ReadinessRetryPolicy(sleep=sleep),
        command_policy=ReadinessRetryPolicy(sleep=sleep),
        reauth_delay=0,
    )


@pytest.fixture
def mock_api():
    """Provide an aioresponses mock context."""
    with aioresponses() as m:
        yield m


def calls_to(mock_api, method, path):
    """Return every recorded aioresponses call to a path, any query string."""
    return [
        call
        for (req_method, url), calls in mock_api.requests.items()
        if req_method == method and url.path == path
        for call in calls
    ]
