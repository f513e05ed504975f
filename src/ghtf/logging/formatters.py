"""
Formatter for ghtf log entries.
"""

import logging
from .utils import sanitize_data
from ghtf.constants import SENSITIVE_KEYS


class GhtfFormatter(logging.Formatter):
    """
    `[timestamp] LEVEL [logger] message`, masking credential values passed as
    dict or list messages and arguments.
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        sanitize_sensitive: bool = True,
        sensitive_keys: tuple = None,
    ):
        self.sanitize_sensitive = sanitize_sensitive
        self.sensitive_keys = sensitive_keys or SENSITIVE_KEYS

        fmt = "%(levelname)s [%(name)s] %(message)s"
        if include_timestamps:
            fmt = "%(asctime)s " + fmt
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        if self.sanitize_sensitive:
            if isinstance(record.msg, (dict, list)):
                record.msg = sanitize_data(record.msg, self.sensitive_keys)
            elif isinstance(record.args, (tuple, list)):
                record.args = tuple(
                    sanitize_data(arg, self.sensitive_keys)
                    if isinstance(arg, (dict, list)) else arg
                    for arg in record.args
                )

        return super().format(record)
