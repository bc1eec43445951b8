"""@policy decorator — register decision predicates."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from codeauthz.policy._registry import PolicyRegistry

__all__ = ["policy"]

F = TypeVar("F", bound=Callable[[Any, Any], bool])


def policy(registry: PolicyRegistry[Any, Any], action: str) -> Callable[[F], F]:
    """Decorator that registers a predicate for *action* on *registry*.

    The decorated function receives ``(subject, target)`` and returns a
    bool. Its name and docstring become the policy metadata.

    Args:
        registry: The registry to register on.
        action: The action identifier (e.g. ``"delete"``).

    Returns:
        A decorator that registers the function and returns it unchanged.

    Raises:
        DuplicatePolicyError: At decoration time, if *action* is taken.

    Example::

        users = PolicyRegistry[User, User]()

        @policy(users, "delete")
        def delete_user(actor: User, other: User) -> bool:
            # Admins may delete non-admins.
            return actor.is_admin and not other.is_admin
    """

    def decorator(fn: F) -> F:
        registry.register(action, fn, name=fn.__name__, description=fn.__doc__ or "")
        return fn

    return decorator
