"""PolicyRegistry — binds action identifiers to decision predicates."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Generic

from codeauthz._types import Effector, SubjectT, TargetT
from codeauthz.config._config import get_global_config
from codeauthz.exceptions import DuplicatePolicyError, NoPolicyError
from codeauthz.policy._base import PolicyRegistration

__all__ = ["PolicyRegistry"]

logger = logging.getLogger("codeauthz.policy")


class PolicyRegistry(Generic[SubjectT, TargetT]):
    """Registry that maps action identifiers to decision predicates.

    A registry is bound to one subject type and one target type; every
    predicate registered on it takes ``(subject, target)`` and returns
    ``True`` (permitted) or ``False`` (denied). Each action has exactly
    one predicate, and that association never changes once made.

    Registration is serialized by an internal lock. Enforcement only
    reads the mapping, so once start-up registration is done the
    registry is safe for any number of concurrent ``enforce`` calls.

    Example::

        registry = PolicyRegistry[User, Document]()
        registry.register("delete", lambda user, doc: user.is_admin)

        if registry.enforce(current_user, "delete", doc):
            ...
    """

    def __init__(self) -> None:
        self._policies: dict[str, PolicyRegistration] = {}
        self._lock = threading.Lock()

    def register(
        self,
        action: str,
        fn: Effector[SubjectT, TargetT],
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        """Register the decision predicate for *action*.

        Args:
            action: A non-empty action identifier. Case-sensitive.
            fn: A callable ``(subject, target) -> bool``.
            name: Human-readable name for the policy. Defaults to the
                function name.
            description: Description of the policy. Defaults to the
                function docstring.

        Raises:
            ValueError: If *action* is not a non-empty string.
            DuplicatePolicyError: If a policy is already registered for
                *action*, even if it is the same function.

        Example::

            registry.register(
                "update:profile",
                lambda user, other: user.is_admin or user.id == other.id,
                name="own_profile_or_admin",
            )
        """
        if not isinstance(action, str) or not action:
            raise ValueError(f"action must be a non-empty string, got {action!r}")

        registration = PolicyRegistration(
            action=action,
            fn=fn,
            name=name if name is not None else getattr(fn, "__name__", "<anonymous>"),
            description=description if description is not None else (fn.__doc__ or ""),
        )
        with self._lock:
            if action in self._policies:
                logger.error(
                    "Refusing to register %s: a policy already exists for action %r",
                    registration.name,
                    action,
                )
                raise DuplicatePolicyError(action=action)
            self._policies[action] = registration

        level = logging.INFO if get_global_config().log_registrations else logging.DEBUG
        logger.log(level, "Registered policy %s for action %r", registration.name, action)

    def enforce(self, subject: SubjectT, action: str, target: TargetT) -> bool:
        """Run the predicate registered for *action* and return its decision.

        The predicate's result is returned unchanged. Exceptions raised
        by the predicate propagate to the caller.

        Args:
            subject: The actor requesting the action.
            action: The action identifier.
            target: The entity the action is performed on.

        Returns:
            ``True`` if the action is permitted, ``False`` if denied.

        Raises:
            NoPolicyError: If no policy is registered for *action*.

        Example::

            if not registry.enforce(user, "delete", doc):
                raise PermissionError
        """
        registration = self._policies.get(action)
        if registration is None:
            logger.error("No policy registered for action %r", action)
            raise NoPolicyError(action=action)
        return registration.fn(subject, target)

    def lookup(self, action: str) -> PolicyRegistration:
        """Return the registration for *action*.

        Raises:
            NoPolicyError: If no policy is registered for *action*.
        """
        registration = self._policies.get(action)
        if registration is None:
            raise NoPolicyError(action=action)
        return registration

    def has_policy(self, action: str) -> bool:
        """Check whether a policy exists for *action*."""
        return action in self._policies

    def actions(self) -> list[str]:
        """Return the registered action identifiers, sorted."""
        return sorted(self._policies)

    @property
    def policies(self) -> Mapping[str, PolicyRegistration]:
        """Read-only view of action identifier to registration."""
        return MappingProxyType(self._policies)

    def __contains__(self, action: object) -> bool:
        return action in self._policies

    def __len__(self) -> int:
        return len(self._policies)

    def __repr__(self) -> str:
        return f"PolicyRegistry(actions={self.actions()!r})"
