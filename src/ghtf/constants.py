"""
Global constants for the ghtf GitHub provider.
"""

# Provider identity
PROVIDER_NAME = "github"

# Used when a base URL argument is given but left empty
DEFAULT_BASE_URL = "https://api.github.com/"

# Environment variables, primary name first; GITHUB_ aliases are read only
# when the primary name is unset
ENV_APP_ID = ("APP_ID", "GITHUB_APP_ID")
ENV_APP_INSTALLATION_ID = ("APP_INSTALLATION_ID", "GITHUB_APP_INSTALLATION_ID")
ENV_APP_PEM_FILE = ("APP_PEM_FILE", "GITHUB_APP_PEM_FILE")
ENV_TOKEN = ("TOKEN", "GITHUB_TOKEN")
ENV_LOG_LEVEL = "GHTF_LOG_LEVEL"

# Range accepted for app and installation IDs (signed 64-bit)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Logging constants
LOG_APP_NAME = "ghtf"
LOG_FILE_NAME = "ghtf"
LOG_RETENTION_DAYS = 7

# Sensitive data keys for sanitization
SENSITIVE_KEYS = (
    "password", "token", "access_token", "jwk", "key", "secret",
    "private_key", "pem", "pem_file", "authorization", "bearer",
)
