"""Policy engine — registration and enforcement of decision predicates."""

from codeauthz.policy._base import PolicyRegistration
from codeauthz.policy._decorator import policy
from codeauthz.policy._registry import PolicyRegistry

__all__ = [
    "PolicyRegistration",
    "PolicyRegistry",
    "policy",
]
