"""Constants for the aiopowerlink library."""

DEFAULT_SCHEME = "https"
DEFAULT_APP_TYPE = "com.visonic.PowerMaxApp"
DEFAULT_TIMEOUT = 2.5  # seconds per HTTP call

# REST API 3.0 (single-step login)
V3_LOGIN_ENDPOINT = "/rest_api/3.0/login"
V3_STATUS_ENDPOINT = "/rest_api/3.0/status"
V3_COMMAND_ENDPOINT = "/web/ajax/security.main.status.ajax.php"

# REST API 4.0 (user token, then panel session token)
V4_AUTH_ENDPOINT = "/rest_api/4.0/auth"
V4_PANEL_LOGIN_ENDPOINT = "/rest_api/4.0/panel/login"
V4_STATUS_ENDPOINT = "/rest_api/4.0/status"
V4_SET_STATE_ENDPOINT = "/rest_api/4.0/set_state"

HEADER_SESSION_TOKEN = "Session-Token"
HEADER_USER_TOKEN = "User-Token"

HTTP_STATUS_SESSION_EXPIRED = 440

REASON_PANEL_NOT_CONNECTED = "PanelNotConnected"

# Readiness retries
DEFAULT_MAX_ATTEMPTS = 3
POLL_INITIAL_BACKOFF = 3.0  # seconds
COMMAND_INITIAL_BACKOFF = 5.0  # seconds
MAX_BACKOFF = 30.0  # seconds
BACKOFF_MULTIPLIER = 2.0

REAUTH_DELAY = 3.0  # seconds before replaying a request after HTTP 440
