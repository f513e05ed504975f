"""
GitHub provider.

Ties credential resolution, configuration emission and the service registry
together behind the interface the import tool drives: `init`, `get_config`
and `init_service`.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ghtf.auth.config_emitter import get_config
from ghtf.auth.credentials import Credentials
from ghtf.auth.resolver import ConfigResolver
from ghtf.constants import PROVIDER_NAME
from ghtf.exceptions import ConfigError, NOT_INITIALIZED
from ghtf.logging import get_logger, log_transaction
from ghtf.services import registry
from ghtf.services.base_generator import ServiceGenerator


class GithubProvider:
    """Provider facade for GitHub.

    Holds the resolved credentials and the generator bound by the most recent
    successful `init_service` call. Not thread-safe: concurrent `init_service`
    calls on one instance race and the last assignment wins.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self.resolver = ConfigResolver(env)
        self.credentials: Optional[Credentials] = None
        self.service: Optional[ServiceGenerator] = None
        self.logger = get_logger("ghtf.provider")

    def get_name(self) -> str:
        return PROVIDER_NAME

    def init(self, args: Sequence[str]) -> None:
        """Resolve credentials from `[owner, token?, base_url?]` and the environment"""
        self.credentials = self.resolver.resolve(args)
        self.logger.info(f"Provider initialized for owner {self.credentials.owner}")

    def _require_credentials(self) -> Credentials:
        if self.credentials is None:
            raise ConfigError(NOT_INITIALIZED, "call init() first")
        return self.credentials

    def get_config(self) -> Dict[str, Any]:
        return get_config(self._require_credentials())

    def get_provider_data(self, *args: str) -> Dict[str, Any]:
        """Provider block for the generated files; owner is "" before init"""
        owner = self.credentials.owner if self.credentials else ""
        return {
            "provider": {
                PROVIDER_NAME: {
                    "owner": owner,
                },
            },
        }

    def get_resource_connections(self) -> Dict[str, Dict[str, List[str]]]:
        # No cross-resource references for GitHub
        return {}

    def get_supported_service(self) -> Dict[str, ServiceGenerator]:
        return registry.get_supported_services()

    def list_supported(self) -> List[str]:
        return registry.list_supported()

    def init_service(self, service_name: str, verbose: bool = False) -> None:
        """
        Bind a fresh generator for a service and inject the shared arguments.

        The full credential bag is injected whatever the active auth mode is;
        the generator picks the fields it needs.

        Raises:
            NotSupportedError: Unknown service; the current generator is kept
            ConfigError: Provider was not initialized
        """
        generator_cls = registry.lookup(service_name)
        credentials = self._require_credentials()
        service_name = registry.ServiceName(service_name).value

        generator = generator_cls()
        generator.set_name(service_name)
        generator.set_verbose(verbose)
        generator.set_provider_name(self.get_name())
        generator.set_args(credentials.as_args())
        self.service = generator

        log_transaction(
            f"init_service {service_name}",
            {"generator": generator_cls.__name__, "verbose": verbose, **credentials.as_args()},
        )
