"""
Registry of supported GitHub services.

The set of services is closed: `ServiceName` enumerates it and the mapping to
generator classes is built once at import and checked for completeness, so a
service without a generator fails at import rather than at lookup.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Type, Union

from ghtf.constants import PROVIDER_NAME
from ghtf.exceptions import NotSupportedError
from .base_generator import ServiceGenerator
from .generators import (
    MembersGenerator,
    OrganizationBlockGenerator,
    OrganizationGenerator,
    OrganizationProjectGenerator,
    OrganizationWebhooksGenerator,
    RepositoriesGenerator,
    TeamsGenerator,
    UserSSHKeyGenerator,
)


class ServiceName(str, Enum):
    MEMBERS = "members"
    ORGANIZATION = "organization"
    ORGANIZATION_BLOCKS = "organization_blocks"
    ORGANIZATION_PROJECTS = "organization_projects"
    ORGANIZATION_WEBHOOKS = "organization_webhooks"
    REPOSITORIES = "repositories"
    TEAMS = "teams"
    USER_SSH_KEYS = "user_ssh_keys"


SUPPORTED_SERVICES: Mapping[ServiceName, Type[ServiceGenerator]] = MappingProxyType({
    ServiceName.MEMBERS: MembersGenerator,
    ServiceName.ORGANIZATION: OrganizationGenerator,
    ServiceName.ORGANIZATION_BLOCKS: OrganizationBlockGenerator,
    ServiceName.ORGANIZATION_PROJECTS: OrganizationProjectGenerator,
    ServiceName.ORGANIZATION_WEBHOOKS: OrganizationWebhooksGenerator,
    ServiceName.REPOSITORIES: RepositoriesGenerator,
    ServiceName.TEAMS: TeamsGenerator,
    ServiceName.USER_SSH_KEYS: UserSSHKeyGenerator,
})

_missing = set(ServiceName) - set(SUPPORTED_SERVICES)
if _missing:
    raise RuntimeError(
        "No generator registered for: " + ", ".join(sorted(s.value for s in _missing))
    )


def lookup(name: Union[str, ServiceName]) -> Type[ServiceGenerator]:
    """
    Get the generator class for a service.

    Raises:
        NotSupportedError: If the name is not a supported service
    """
    try:
        service = ServiceName(name)
    except ValueError:
        raise NotSupportedError(PROVIDER_NAME, str(name)) from None
    return SUPPORTED_SERVICES[service]


def list_supported() -> List[str]:
    """Names of all supported services, in registry order"""
    return [service.value for service in SUPPORTED_SERVICES]


def get_supported_services() -> Dict[str, ServiceGenerator]:
    """Fresh generator instance for every supported service"""
    return {service.value: generator() for service, generator in SUPPORTED_SERVICES.items()}
