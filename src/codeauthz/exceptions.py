"""Exception hierarchy for codeauthz."""

from __future__ import annotations

__all__ = [
    "AuthorizationDenied",
    "AuthzError",
    "DuplicatePolicyError",
    "NoPolicyError",
]


class AuthzError(Exception):
    """Base exception for all codeauthz errors."""


class DuplicatePolicyError(AuthzError):
    """A policy is already registered for the action.

    Two code paths tried to define the same policy. This is a programming
    error and is meant to surface at start-up or in tests, never to be
    handled in a request path.

    Attributes:
        action: The action identifier that was registered twice.

    Example::

        registry.register("delete", can_delete)
        registry.register("delete", other_fn)  # raises DuplicatePolicyError
    """

    def __init__(self, *, action: str) -> None:
        self.action = action
        super().__init__(f"A policy already exists for action {action!r}")


class NoPolicyError(AuthzError):
    """No policy registered for the action.

    Raised on enforcement instead of falling back to allow or deny, so
    that a missing policy is always treated as a configuration error.

    Attributes:
        action: The action with no policy.
    """

    def __init__(self, *, action: str) -> None:
        self.action = action
        super().__init__(f"No policy registered for action {action!r}")


class AuthorizationDenied(AuthzError):  # noqa: N818
    """Subject is not authorized to perform the requested action on the target.

    Only raised by :func:`~codeauthz.authorize` and the web integrations;
    :meth:`~codeauthz.PolicyRegistry.enforce` itself returns ``False``.

    Attributes:
        subject: The subject that was denied.
        action: The action that was attempted.
        target: The target of the action.

    Example::

        try:
            authorize(registry, user, "delete", document)
        except AuthorizationDenied as exc:
            print(f"{exc.subject} cannot {exc.action} {exc.target}")
    """

    def __init__(
        self,
        *,
        subject: object,
        action: str,
        target: object,
        message: str | None = None,
    ) -> None:
        self.subject = subject
        self.action = action
        self.target = target
        if message is None:
            message = f"Subject {subject!r} is not authorized to {action} {target!r}"
        super().__init__(message)
