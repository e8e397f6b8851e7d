"""
Global constants for the mlexport CLI.
"""

# Export defaults
DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 50
DEFAULT_FORMAT = "json"

# API constants
DEFAULT_BASE_URL = "https://api.mercadolibre.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Argument names forwarded to the page source for each paging scheme
SEARCH_ARGS = ("q", "category", "nickname", "seller_id")
ORDERS_ARGS = (
    "seller",
    "feedback_status",
    "payment_status",
    "shipping_status",
    "sort",
    "access_token",
)

# Settings keys accepted by "mlexport config set"
SETTINGS_KEYS = ("site_id", "format", "limit", "log_level", "base_url")

# Keyring
KEYRING_SERVICE = "mlexport"
KEYRING_TOKEN_USER = "access_token"

# Logging constants
LOG_APP_NAME = "mlexport"
LOG_FILE_NAME = "mlexport"
LOG_RETENTION_DAYS = 7
LOG_LINES_TO_SHOW = 20
LOG_DIR_ENV = "MLEXPORT_LOG_DIR"

# Sensitive data keys for sanitization
SENSITIVE_KEYS = (
    "password", "token", "access_token", "refresh_token", "secret",
    "client_secret", "authorization", "api_key", "bearer", "cookie",
)
