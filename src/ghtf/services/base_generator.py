"""
Base generator contract.

A generator discovers the resources of one logical service. The provider
creates one per `init_service` call and injects the service name, the verbose
flag, the provider name and the shared credential bag through the setters
below. Resource discovery itself lives in the importer, not here.
"""

from abc import ABC
from typing import Any, Dict, Optional

from ghtf.auth.credentials import AuthMode, Credentials, select_auth_mode


class ServiceGenerator(ABC):
    """Base class for all GitHub service generators"""

    def __init__(self):
        self._name: str = ""
        self._verbose: bool = False
        self._provider_name: str = ""
        self._args: Dict[str, Any] = {}

    def set_name(self, name: str) -> None:
        self._name = name

    def get_name(self) -> str:
        return self._name

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = verbose

    def is_verbose(self) -> bool:
        return self._verbose

    def set_provider_name(self, provider_name: str) -> None:
        self._provider_name = provider_name

    def get_provider_name(self) -> str:
        return self._provider_name

    def set_args(self, args: Dict[str, Any]) -> None:
        """Store a copy of the injected argument bag"""
        self._args = dict(args)

    def get_args(self) -> Dict[str, Any]:
        return dict(self._args)

    def get_arg(self, key: str, default: Optional[Any] = None) -> Any:
        return self._args.get(key, default)

    def auth_mode(self) -> AuthMode:
        """Authentication mode implied by the injected arguments"""
        return select_auth_mode(Credentials.from_args(self._args))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"provider={self._provider_name!r}, verbose={self._verbose})"
        )
