"""FastAPI dependencies for codeauthz authorization."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from codeauthz._checks import authorize
from codeauthz.policy._registry import PolicyRegistry

__all__ = ["AuthzDep", "get_subject"]


# ---------------------------------------------------------------------------
# Sentinel dependency for DI-based configuration
# ---------------------------------------------------------------------------


def get_subject(request: Request) -> Any:
    """Sentinel dependency — override via ``app.dependency_overrides[get_subject]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their subject provider before using ``AuthzDep``.

    Example::

        from codeauthz.integrations.fastapi import get_subject

        app.dependency_overrides[get_subject] = get_current_user
    """
    raise NotImplementedError(
        "Override get_subject via app.dependency_overrides[get_subject]. "
        "See codeauthz docs for configuration guide."
    )


# ---------------------------------------------------------------------------
# Dependency builder
# ---------------------------------------------------------------------------


def _make_dependency(
    registry: PolicyRegistry[Any, Any],
    action: str,
    target: Callable[..., Any],
) -> Callable[..., Any]:
    """Build the dependency function for a given registry/action.

    Args:
        registry: The registry holding the policy for *action*.
        action: The authorization action string.
        target: Dependency callable that resolves the target.
    """

    def _resolve(
        subject: Any = Depends(get_subject),
        resource: Any = Depends(target),
    ) -> Any:
        authorize(registry, subject, action, resource)
        return resource

    return _resolve


def AuthzDep(
    registry: PolicyRegistry[Any, Any],
    action: str,
    *,
    target: Callable[..., Any],
) -> Any:
    """FastAPI dependency that authorizes access to a target.

    Returns a ``Depends()`` instance that resolves the subject through
    :func:`get_subject`, the target through *target* (any FastAPI
    dependency, so it may read path parameters), enforces *action* and
    returns the target. A denial raises ``AuthorizationDenied``; install
    :func:`install_error_handlers` to turn it into an HTTP response.

    Use directly as a default parameter value in route signatures.

    Args:
        registry: The registry holding the policy for *action*.
        action: The authorization action (e.g., ``"delete"``).
        target: A dependency callable returning the target.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        def load_document(doc_id: str) -> Document:
            return DOCUMENTS[doc_id]

        @app.delete("/documents/{doc_id}")
        def delete_document(
            doc: Document = AuthzDep(documents, "delete", target=load_document),
        ) -> dict:
            DOCUMENTS.pop(doc.id)
            return {"deleted": doc.id}
    """
    return Depends(_make_dependency(registry, action, target))
