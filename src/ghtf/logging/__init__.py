"""
ghtf logging module.

Structured logging for the GitHub provider: a daily rotating log file in a
platform-specific directory, a stderr handler for warnings and errors, and
automatic masking of tokens and key material before anything is written.
"""

from .logger import (
    get_logger,
    setup_logging,
    LogLevel,
    log_transaction,
    log_application_event,
    log_authentication_event
)
from .config import LogConfig
from .utils import sanitize_data, get_log_directory

__all__ = [
    "get_logger",
    "setup_logging",
    "log_transaction",
    "log_application_event",
    "log_authentication_event",
    "LogLevel",
    "LogConfig",
    "sanitize_data",
    "get_log_directory"
]
