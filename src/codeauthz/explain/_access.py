"""explain_access() — explain why a subject can/can't perform an action."""

from __future__ import annotations

from codeauthz._types import SubjectT, TargetT
from codeauthz.explain._models import AccessExplanation
from codeauthz.policy._registry import PolicyRegistry

__all__ = ["explain_access"]


def explain_access(
    registry: PolicyRegistry[SubjectT, TargetT],
    subject: SubjectT,
    action: str,
    target: TargetT,
) -> AccessExplanation:
    """Explain which policy decides *action* and what it decided.

    Runs the registered predicate exactly as
    :meth:`~codeauthz.PolicyRegistry.enforce` would and reports the
    policy metadata alongside the result.

    Args:
        registry: The registry holding the policy for *action*.
        subject: The actor performing the action.
        action: The action identifier.
        target: The entity the action is performed on.

    Returns:
        An ``AccessExplanation`` describing the decision.

    Raises:
        NoPolicyError: If no policy is registered for *action*.

    Example::

        print(explain_access(users, alice, "update:profile", bob))
    """
    registration = registry.lookup(action)
    allowed = registry.enforce(subject, action, target)
    return AccessExplanation(
        subject_repr=repr(subject),
        action=action,
        target_repr=repr(target),
        policy_name=registration.name,
        policy_description=registration.description,
        allowed=allowed,
    )
