"""Global configuration for codeauthz."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "AuthzConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]


@dataclass(frozen=True, slots=True)
class AuthzConfig:
    """Library-wide settings with merge semantics.

    None of these settings change what a registry decides: a missing
    policy is always an error and a registered predicate's result is
    always returned as is.

    Attributes:
        log_registrations: Log each policy registration at INFO instead
            of DEBUG on the ``codeauthz.policy`` logger.
        denied_status_code: HTTP status the web integrations answer with
            when ``AuthorizationDenied`` is raised. Must be a 4xx code.
        missing_policy_status_code: HTTP status the web integrations
            answer with when ``NoPolicyError`` is raised. Must be a 5xx code.

    Example::

        config = AuthzConfig(denied_status_code=404)
        merged = config.merge(log_registrations=True)
    """

    log_registrations: bool = False
    denied_status_code: int = 403
    missing_policy_status_code: int = 500

    def __post_init__(self) -> None:
        if not 400 <= self.denied_status_code <= 499:
            raise ValueError(
                f"denied_status_code must be a 4xx status code, got {self.denied_status_code!r}"
            )
        if not 500 <= self.missing_policy_status_code <= 599:
            raise ValueError(
                f"missing_policy_status_code must be a 5xx status code, "
                f"got {self.missing_policy_status_code!r}"
            )

    def merge(
        self,
        *,
        log_registrations: bool | None = None,
        denied_status_code: int | None = None,
        missing_policy_status_code: int | None = None,
    ) -> AuthzConfig:
        """Return a new config with non-None overrides applied.

        Args:
            log_registrations: Override for log_registrations (ignored if None).
            denied_status_code: Override for denied_status_code (ignored if None).
            missing_policy_status_code: Override for missing_policy_status_code
                (ignored if None).

        Returns:
            A new ``AuthzConfig`` with overrides merged.
        """
        return AuthzConfig(
            log_registrations=(
                log_registrations if log_registrations is not None else self.log_registrations
            ),
            denied_status_code=(
                denied_status_code if denied_status_code is not None else self.denied_status_code
            ),
            missing_policy_status_code=(
                missing_policy_status_code
                if missing_policy_status_code is not None
                else self.missing_policy_status_code
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AuthzConfig()


def get_global_config() -> AuthzConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.denied_status_code)  # 403
    """
    return _global_config


def configure(
    *,
    log_registrations: bool | None = None,
    denied_status_code: int | None = None,
    missing_policy_status_code: int | None = None,
) -> AuthzConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(log_registrations=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        log_registrations=log_registrations,
        denied_status_code=denied_status_code,
        missing_policy_status_code=missing_policy_status_code,
    )
    return _global_config


def _set_global_config(cfg: AuthzConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AuthzConfig()
