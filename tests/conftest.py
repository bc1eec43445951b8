"""Shared test fixtures for codeauthz tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from codeauthz.config._config import _reset_global_config
from codeauthz.policy._registry import PolicyRegistry
from tests._models import Resource, User

# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------


def build_user_registry() -> PolicyRegistry[User, User]:
    users = PolicyRegistry[User, User]()

    def delete_user(actor: User, other: User) -> bool:
        """Admins may delete non-admins."""
        if other.is_admin:
            return False
        return actor.is_admin

    def update_profile(actor: User, other: User) -> bool:
        """Admins, profile moderators and the profile owner may update it."""
        if actor.is_admin:
            return True
        if actor.id == other.id:
            return True
        return "ProfileModerator" in actor.roles

    users.register("delete", delete_user)
    users.register("update:profile", update_profile)
    return users


def build_resource_registry() -> PolicyRegistry[User, Resource]:
    resources = PolicyRegistry[User, Resource]()

    def delete_resource(user: User, resource: Resource) -> bool:
        """Admins, owners, resource managers, and archivists for old resources."""
        if user.is_admin:
            return True
        if user.id == resource.owner:
            return True
        if user.team == "ResourceManagers":
            return True
        cutoff = datetime.now(timezone.utc) - timedelta(days=30)
        return "Archivist" in user.roles and resource.created < cutoff

    resources.register("delete", delete_resource)
    return resources


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def user_registry() -> PolicyRegistry[User, User]:
    return build_user_registry()


@pytest.fixture()
def resource_registry() -> PolicyRegistry[User, Resource]:
    return build_resource_registry()


@pytest.fixture()
def reset_config():
    """Reset the global config to defaults before and after the test."""
    _reset_global_config()
    yield
    _reset_global_config()
