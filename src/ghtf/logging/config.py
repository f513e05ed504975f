"""
Where ghtf writes its log and at which level.

The file level comes from GHTF_LOG_LEVEL when it names a known level; the
console only ever shows warnings and errors so credential resolution output
stays readable.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from ghtf.constants import (
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
    LOG_RETENTION_DAYS,
    SENSITIVE_KEYS
)


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["LogLevel"]:
        """Level named by `value` (case-insensitive), or None if unknown"""
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            return None


@dataclass
class LogConfig:
    """Settings consumed by setup_logging"""

    level: LogLevel = LogLevel.INFO
    console_level: LogLevel = LogLevel.WARNING
    filename: str = f"{LOG_FILE_NAME}.log"
    retention_days: int = LOG_RETENTION_DAYS
    sensitive_keys: tuple = SENSITIVE_KEYS

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "LogConfig":
        env = os.environ if env is None else env
        config = cls()
        level = LogLevel.parse(env.get(ENV_LOG_LEVEL))
        if level is not None:
            config.level = level
        return config


def _platform_log_dir() -> Path:
    system = platform.system()
    if system == "Windows":
        appdata = Path(os.environ.get("APPDATA", ""))
        root = appdata if appdata.exists() else Path.home()
        return root / LOG_FILE_NAME / "logs"
    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / LOG_FILE_NAME
    data_home = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(data_home) / LOG_FILE_NAME / "logs"


def get_log_directory() -> Path:
    """
    Create and return the log directory.

    Falls back to ./logs when the platform directory cannot be created.
    """
    log_dir = _platform_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        log_dir = Path.cwd() / "logs"
        log_dir.mkdir(exist_ok=True)
    return log_dir


def get_log_file_path(config: Optional[LogConfig] = None) -> Path:
    return get_log_directory() / (config or LogConfig()).filename
