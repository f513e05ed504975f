"""
Credential resolution from positional arguments and environment.

Positional input is `[owner, token?, base_url?]`. GitHub App settings only
ever come from the environment; the token comes from the second positional
argument when present and from TOKEN otherwise. Each variable also has a
GITHUB_-prefixed alias (GITHUB_TOKEN, GITHUB_APP_ID, ...) that is only read
when the unprefixed name is unset.
"""

import os
import re
from typing import Mapping, Optional, Sequence, Tuple

from ghtf.constants import (
    DEFAULT_BASE_URL,
    ENV_APP_ID,
    ENV_APP_INSTALLATION_ID,
    ENV_APP_PEM_FILE,
    ENV_TOKEN,
    INT64_MAX,
    INT64_MIN,
)
from ghtf.exceptions import (
    ConfigError,
    INVALID_NUMERIC_ENV,
    MISSING_OWNER,
    TOKEN_REQUIREMENT,
)
from ghtf.logging import get_logger, log_authentication_event
from .credentials import Credentials, select_auth_mode

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ConfigResolver:
    """Builds Credentials from arguments and an injectable environment mapping"""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self.env = os.environ if env is None else env
        self.logger = get_logger("ghtf.auth.resolver")

    def resolve(self, args: Sequence[str]) -> Credentials:
        """
        Resolve credentials.

        Args:
            args: Positional inputs, owner first

        Returns:
            Credentials: Fully resolved credentials

        Raises:
            ConfigError: Missing owner, missing token, or a malformed
                numeric environment value
        """
        try:
            credentials = self._resolve(list(args))
        except ConfigError as e:
            log_authentication_event("resolve", False, {"reason": e.reason})
            raise

        auth = select_auth_mode(credentials)
        log_authentication_event(
            auth.mode,
            True,
            {"owner": credentials.owner, "base_url": credentials.base_url},
        )
        return credentials

    def _resolve(self, args: list) -> Credentials:
        app_id = self._int_from_env(ENV_APP_ID)
        installation_id = self._int_from_env(ENV_APP_INSTALLATION_ID)

        pem = ""
        pem_var = self._lookup(ENV_APP_PEM_FILE)
        if pem_var:
            # Shell-exported keys arrive with escaped newlines
            pem = pem_var[1].replace("\\n", "\n")

        if not args or not args[0]:
            raise ConfigError(MISSING_OWNER)
        owner = args[0]

        if len(args) < 2:
            token_var = self._lookup(ENV_TOKEN)
            if not token_var or not token_var[1]:
                raise ConfigError(
                    TOKEN_REQUIREMENT, f"pass a token argument or set {ENV_TOKEN[0]}"
                )
            token = token_var[1]
            self.logger.debug(f"Using token from {token_var[0]}")
        else:
            token = args[1]

        base_url = ""
        if len(args) > 2:
            base_url = args[2] or DEFAULT_BASE_URL

        return Credentials(
            owner=owner,
            token=token,
            base_url=base_url,
            app_id=app_id,
            installation_id=installation_id,
            pem=pem,
        )

    def _lookup(self, names: Tuple[str, ...]) -> Optional[Tuple[str, str]]:
        """First of `names` set in the environment, with its value"""
        for name in names:
            if name in self.env:
                return name, self.env[name]
        return None

    def _int_from_env(self, names: Tuple[str, ...]) -> int:
        """Parse a base-10 signed 64-bit integer; unset variables yield 0"""
        found = self._lookup(names)
        if found is None:
            return 0
        name, value = found
        if not _INTEGER_RE.fullmatch(value):
            raise ConfigError(INVALID_NUMERIC_ENV, f"{name}={value!r}")
        number = int(value)
        if not INT64_MIN <= number <= INT64_MAX:
            raise ConfigError(INVALID_NUMERIC_ENV, f"{name} out of range")
        return number


def resolve_credentials(
    args: Sequence[str], env: Optional[Mapping[str, str]] = None
) -> Credentials:
    """Resolve credentials with a one-off resolver"""
    return ConfigResolver(env).resolve(args)
