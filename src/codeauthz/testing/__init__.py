"""codeauthz testing utilities — assertions, fixtures and decision tables.

Provides test helpers for verifying authorization policies:

- **Assertion helpers**: ``assert_permitted``, ``assert_denied``.
- **Fixtures**: ``authz_registry``, ``isolated_authz_state``.
- **Review tools**: ``decision_table``, ``diff_policies``.

Example::

    from codeauthz.testing import assert_denied, assert_permitted

    def test_only_admins_delete(users_registry):
        assert_permitted(users_registry, admin, "delete", bob)
        assert_denied(users_registry, bob, "delete", alice)
"""

from codeauthz.testing._assertions import assert_denied, assert_permitted
from codeauthz.testing._fixtures import authz_registry, isolated_authz_state
from codeauthz.testing._isolation import isolated_authz
from codeauthz.testing._simulation import (
    DecisionRow,
    DecisionTable,
    PolicyDiff,
    decision_table,
    diff_policies,
)

__all__ = [
    "DecisionRow",
    "DecisionTable",
    "PolicyDiff",
    "assert_denied",
    "assert_permitted",
    "authz_registry",
    "decision_table",
    "diff_policies",
    "isolated_authz",
    "isolated_authz_state",
]
