"""
Generators for the GitHub services supported by the provider.
"""

from .base_generator import ServiceGenerator


class MembersGenerator(ServiceGenerator):
    """Organization memberships"""


class OrganizationGenerator(ServiceGenerator):
    """Organization settings"""


class OrganizationBlockGenerator(ServiceGenerator):
    """Users blocked by the organization"""


class OrganizationProjectGenerator(ServiceGenerator):
    """Organization-level projects"""


class OrganizationWebhooksGenerator(ServiceGenerator):
    """Organization webhooks"""


class RepositoriesGenerator(ServiceGenerator):
    """Repositories owned by the organization or user"""


class TeamsGenerator(ServiceGenerator):
    """Teams and team memberships"""


class UserSSHKeyGenerator(ServiceGenerator):
    """SSH keys of the authenticated user"""
