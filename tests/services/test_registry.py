import pytest

from ghtf.exceptions import NotSupportedError
from ghtf.services import registry
from ghtf.services.base_generator import ServiceGenerator
from ghtf.services.generators import MembersGenerator, UserSSHKeyGenerator
from ghtf.services.registry import ServiceName

EXPECTED = [
    "members",
    "organization",
    "organization_blocks",
    "organization_projects",
    "organization_webhooks",
    "repositories",
    "teams",
    "user_ssh_keys",
]


def test_list_supported_returns_all_services():
    assert registry.list_supported() == EXPECTED


def test_every_service_name_has_a_generator():
    assert set(registry.SUPPORTED_SERVICES) == set(ServiceName)
    for generator in registry.SUPPORTED_SERVICES.values():
        assert issubclass(generator, ServiceGenerator)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        registry.SUPPORTED_SERVICES[ServiceName.MEMBERS] = UserSSHKeyGenerator


def test_lookup_by_string_and_enum():
    assert registry.lookup("members") is MembersGenerator
    assert registry.lookup(ServiceName.USER_SSH_KEYS) is UserSSHKeyGenerator


def test_lookup_unknown_raises():
    with pytest.raises(NotSupportedError) as exc:
        registry.lookup("bogus")

    assert exc.value.provider == "github"
    assert exc.value.service == "bogus"
    assert str(exc.value) == "github: bogus not supported service"


def test_get_supported_services_returns_fresh_instances():
    first = registry.get_supported_services()
    second = registry.get_supported_services()

    assert list(first) == EXPECTED
    assert first["teams"] is not second["teams"]
