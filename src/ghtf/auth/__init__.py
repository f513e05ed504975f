"""
Credential resolution and authentication-mode selection.
"""

from .credentials import AppAuth, Credentials, TokenAuth, select_auth_mode
from .resolver import ConfigResolver, resolve_credentials
from .config_emitter import get_config

__all__ = [
    "AppAuth",
    "Credentials",
    "TokenAuth",
    "select_auth_mode",
    "ConfigResolver",
    "resolve_credentials",
    "get_config",
]
