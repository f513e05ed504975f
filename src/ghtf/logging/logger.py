"""
Main logging module for ghtf.

This module provides the logging interface used across the provider: logger
setup with daily rotation, cached logger lookup and the structured event
helpers for credential resolution and service binding.
"""

import logging
import logging.handlers
import sys
from typing import Optional, Dict, Any

from . import config as log_settings
from .config import LogConfig, LogLevel
from .formatters import GhtfFormatter
from .utils import cleanup_old_logs, sanitize_data
from ghtf.constants import SENSITIVE_KEYS


# Global logger registry
_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False
_log_config: Optional[LogConfig] = None


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the ghtf logging system.

    Args:
        config: LogConfig instance, built from the environment if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured, _log_config

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        config = LogConfig.from_env()

    _log_config = config

    log_file_path = log_settings.get_log_file_path(config)

    root_logger = logging.getLogger("ghtf")
    root_logger.setLevel(getattr(logging, config.level.value))
    root_logger.handlers.clear()

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file_path,
        when='midnight',
        interval=1,
        backupCount=config.retention_days,
        encoding='utf-8',
        utc=False
    )
    file_handler.setLevel(getattr(logging, config.level.value))
    file_handler.suffix = "%Y-%m-%d"

    file_handler.setFormatter(GhtfFormatter(
        sensitive_keys=config.sensitive_keys
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.console_level.value))
    console_handler.setFormatter(GhtfFormatter(
        include_timestamps=False,
        sensitive_keys=config.sensitive_keys
    ))
    root_logger.addHandler(console_handler)

    try:
        cleanup_old_logs(log_file_path.parent, config.retention_days)
    except OSError:
        # Pruning is best effort
        pass

    _logging_configured = True

    setup_logger = get_logger("ghtf.setup")
    setup_logger.info(f"Logging initialized - File: {log_file_path}, "
                      f"Level: {config.level.value}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'ghtf.auth.resolver')

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def log_transaction(
    operation: str,
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "ghtf.transaction"
) -> None:
    """
    Log a state-changing operation (such as binding a generator) at DEBUG level.

    Args:
        operation: Description of the operation
        details: Additional details, sanitized before logging
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {"transaction_operation": operation}

    if details:
        extra["transaction_details"] = sanitize_data(details, SENSITIVE_KEYS)

    logger.debug(f"Transaction: {operation}", extra=extra)


def log_application_event(
    event: str,
    level: str = "info",
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "ghtf.app"
) -> None:
    """
    Log application-level events at appropriate levels.

    Args:
        event: Description of the event
        level: Log level (debug, info, warning, error)
        details: Additional event details
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {"app_event": event}

    if details:
        extra["app_details"] = details

    log_method = getattr(logger, level.lower(), logger.info)
    log_method(f"Application: {event}", extra=extra)


def log_authentication_event(
    auth_type: str,
    success: bool,
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "ghtf.auth"
) -> None:
    """
    Log the outcome of credential resolution.

    Args:
        auth_type: Authentication mode ("token", "app") or the resolution step
        success: Whether resolution succeeded
        details: Additional details (always sanitized)
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {
        "auth_type": auth_type,
        "auth_success": success
    }

    if details:
        extra["auth_details"] = sanitize_data(details, SENSITIVE_KEYS)

    if success:
        logger.info(f"Credentials resolved: {auth_type}", extra=extra)
    else:
        logger.error(f"Credential resolution failed: {auth_type}", extra=extra)
