"""
Utility functions for ghtf logging.

Masking of credential values and pruning of rotated log files.
"""

import re
from typing import Any, Dict, List, Tuple
from pathlib import Path
from datetime import datetime, timedelta
from ghtf.constants import LOG_FILE_NAME


def sanitize_data(data: Any, sensitive_keys: Tuple[str, ...]) -> Any:
    """
    Recursively sanitize sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to sanitize (dict, list, str, or other)
        sensitive_keys: Tuple of keys/patterns to sanitize

    Returns:
        Any: Sanitized data with sensitive values replaced
    """
    if isinstance(data, dict):
        return sanitize_dict(data, sensitive_keys)
    elif isinstance(data, list):
        return sanitize_list(data, sensitive_keys)
    elif isinstance(data, str):
        return sanitize_string(data, sensitive_keys)
    else:
        return data


def sanitize_dict(data: Dict[str, Any], sensitive_keys: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Sanitize sensitive values in a dictionary.

    Keys are matched case-insensitively by substring. Long string values keep
    their first and last four characters; everything else becomes "***".
    Multi-line values (PEM keys) are always fully masked.
    """
    sanitized = {}

    for key, value in data.items():
        key_lower = str(key).lower()

        is_sensitive = any(
            sensitive_key.lower() in key_lower
            for sensitive_key in sensitive_keys
        )

        if is_sensitive:
            if isinstance(value, str) and len(value) > 8 and "\n" not in value:
                sanitized[key] = f"{value[:4]}...{value[-4:]}"
            else:
                sanitized[key] = "***"
        else:
            sanitized[key] = sanitize_data(value, sensitive_keys)

    return sanitized


def sanitize_list(data: List[Any], sensitive_keys: Tuple[str, ...]) -> List[Any]:
    """Sanitize sensitive values in a list."""
    return [sanitize_data(item, sensitive_keys) for item in data]


def sanitize_string(data: str, sensitive_keys: Tuple[str, ...]) -> str:
    """
    Sanitize sensitive patterns in free text.

    Covers bearer tokens, GitHub token prefixes, query parameters with
    sensitive names and inline PEM blocks.
    """
    patterns = [
        (r'Bearer\s+[A-Za-z0-9\-._~+/]+=*', 'Bearer ***'),
        (r'\b(?:ghp|gho|ghu|ghs|ghr|github_pat)_[A-Za-z0-9_]+', '***'),
        (r'([?&](?:token|key|secret|password)=)[^&\s]+', r'\1***'),
        (r'-----BEGIN [A-Z ]+-----.*?-----END [A-Z ]+-----', '***PEM***'),
    ]

    sanitized = data
    for pattern, replacement in patterns:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE | re.DOTALL)

    return sanitized


def cleanup_old_logs(log_directory: Path, retention_days: int = 30) -> int:
    """
    Remove rotated log files older than the retention window.

    Returns:
        int: Number of files removed
    """
    if not log_directory.exists():
        return 0

    cutoff = (datetime.now() - timedelta(days=retention_days)).timestamp()
    cleaned_count = 0

    for log_file in log_directory.glob(f"{LOG_FILE_NAME}.log.*"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                cleaned_count += 1
        except OSError:
            continue

    return cleaned_count


def get_log_directory() -> Path:
    """Get the log directory path (imported from config for convenience)."""
    from .config import get_log_directory as _get_log_directory
    return _get_log_directory()
