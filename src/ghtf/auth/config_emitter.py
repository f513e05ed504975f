"""
Normalized provider configuration.

The emitted field names (owner, token, base_url, app_auth, id,
installation_id, pem_file) are read by the HCL serializer and must not change.
"""

from typing import Any, Dict

from ghtf.logging import get_logger
from .credentials import Credentials, select_auth_mode


def get_config(credentials: Credentials) -> Dict[str, Any]:
    """Return the token-shaped or app-shaped configuration for credentials"""
    auth = select_auth_mode(credentials)
    get_logger("ghtf.auth.config_emitter").debug(
        f"Emitting {auth.mode} configuration for owner {credentials.owner}"
    )
    return auth.to_config()
