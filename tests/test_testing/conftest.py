"""Import fixtures from codeauthz.testing for test discovery."""

from codeauthz.testing._fixtures import authz_registry, isolated_authz_state

__all__ = ["authz_registry", "isolated_authz_state"]
