"""codeauthz — embeddable, code-based authorization.

Policies are plain Python predicates registered per action on a
registry bound to one subject type and one target type. No policy
language, no servers, no storage.

Example::

    from codeauthz import PolicyRegistry, policy

    documents = PolicyRegistry[User, Document]()

    @policy(documents, "delete")
    def delete_document(user: User, doc: Document) -> bool:
        return user.is_admin or doc.owner == user.id

    if documents.enforce(current_user, "delete", doc):
        ...
"""

from importlib.metadata import PackageNotFoundError, version

from codeauthz._checks import authorize
from codeauthz._types import Effector
from codeauthz.config._config import AuthzConfig, configure
from codeauthz.exceptions import (
    AuthorizationDenied,
    AuthzError,
    DuplicatePolicyError,
    NoPolicyError,
)
from codeauthz.explain._access import explain_access
from codeauthz.policy._base import PolicyRegistration
from codeauthz.policy._decorator import policy
from codeauthz.policy._registry import PolicyRegistry

try:
    __version__ = version("codeauthz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AuthorizationDenied",
    "AuthzConfig",
    "AuthzError",
    "DuplicatePolicyError",
    "Effector",
    "NoPolicyError",
    "PolicyRegistration",
    "PolicyRegistry",
    "authorize",
    "configure",
    "explain_access",
    "policy",
]
