"""
ghtf - GitHub provider for infrastructure import.
"""

from .provider import GithubProvider
from .exceptions import ConfigError, GhtfError, NotSupportedError

__all__ = ["GithubProvider", "ConfigError", "GhtfError", "NotSupportedError"]

__version__ = "0.1.0"
