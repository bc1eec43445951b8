"""Isolation utilities for global codeauthz state in tests."""

from __future__ import annotations

import contextlib
from collections.abc import Generator

from codeauthz.config._config import (
    AuthzConfig,
    _reset_global_config,  # pyright: ignore[reportPrivateUsage]
    _set_global_config,  # pyright: ignore[reportPrivateUsage]
    get_global_config,
)

__all__ = ["isolated_authz"]


@contextlib.contextmanager
def isolated_authz(
    *,
    config: AuthzConfig | None = None,
) -> Generator[AuthzConfig, None, None]:
    """Context manager that provides isolated global configuration.

    Saves the current global config, applies *config* (or the defaults),
    yields the effective config and restores the original on exit, even
    if the body raises. Registries hold no global state, so only the
    config needs isolating.

    Args:
        config: Optional config to use during the isolated block.
            If None, resets to defaults.

    Yields:
        The effective ``AuthzConfig`` for the isolated scope.

    Example::

        with isolated_authz(config=AuthzConfig(log_registrations=True)) as cfg:
            registry.register("read", can_read)
    """
    saved_config = get_global_config()
    try:
        if config is not None:
            _set_global_config(config)
        else:
            _reset_global_config()
        yield get_global_config()
    finally:
        _set_global_config(saved_config)
