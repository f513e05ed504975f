"""
GitHub service registry and generator contract.
"""

from .base_generator import ServiceGenerator
from .registry import (
    SUPPORTED_SERVICES,
    ServiceName,
    get_supported_services,
    list_supported,
    lookup,
)

__all__ = [
    "ServiceGenerator",
    "SUPPORTED_SERVICES",
    "ServiceName",
    "get_supported_services",
    "list_supported",
    "lookup",
]
