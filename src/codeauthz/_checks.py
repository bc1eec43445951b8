"""authorize() — enforce a policy and raise on denial."""

from __future__ import annotations

from codeauthz._types import SubjectT, TargetT
from codeauthz.exceptions import AuthorizationDenied
from codeauthz.policy._registry import PolicyRegistry

__all__ = ["authorize"]


def authorize(
    registry: PolicyRegistry[SubjectT, TargetT],
    subject: SubjectT,
    action: str,
    target: TargetT,
    *,
    message: str | None = None,
) -> None:
    """Assert that *subject* is authorized to perform *action* on *target*.

    Raises :class:`~codeauthz.exceptions.AuthorizationDenied` when the
    registered predicate returns ``False``. Returns ``None`` on success.

    Args:
        registry: The registry holding the policy for *action*.
        subject: The actor performing the action.
        action: The action identifier.
        target: The entity the action is performed on.
        message: Optional custom error message for the exception.

    Raises:
        AuthorizationDenied: If the action is denied.
        NoPolicyError: If no policy is registered for *action*.

    Example::

        authorize(documents, current_user, "delete", doc)  # raises if denied
        session.delete(doc)
    """
    if not registry.enforce(subject, action, target):
        raise AuthorizationDenied(
            subject=subject,
            action=action,
            target=target,
            message=message,
        )
