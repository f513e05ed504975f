"""
Exceptions raised by the provider core.

All failures are raised synchronously to the immediate caller; the CLI layer
is the only place that turns them into console output and exit codes.
"""

from typing import Optional

# ConfigError reasons
MISSING_OWNER = "missing owner"
TOKEN_REQUIREMENT = "token requirement"
INVALID_NUMERIC_ENV = "invalid numeric env value"
NOT_INITIALIZED = "provider not initialized"


class GhtfError(Exception):
    """Base class for ghtf errors"""


class ConfigError(GhtfError):
    """Credentials could not be resolved from arguments and environment"""

    def __init__(self, reason: str, detail: Optional[str] = None):
        self.reason = reason
        self.detail = detail
        message = f"{reason}: {detail}" if detail else reason
        super().__init__(message)


class NotSupportedError(GhtfError):
    """Requested service is not in the provider's registry"""

    def __init__(self, provider: str, service: str):
        self.provider = provider
        self.service = service
        super().__init__(f"{provider}: {service} not supported service")
