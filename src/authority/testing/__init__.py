"""authority testing utilities - MockUser, assertions, fixtures, and matrices.

Provides test helpers for verifying rule sets:

- **MockUser / factories**: Lightweight users for tests.
- **Assertion helpers**: ``assert_can``, ``assert_cannot``.
- **Fixtures**: ``authority``, ``authority_config``,
  ``isolated_authority_state``.
- **Coverage**: ``permission_matrix`` over actions and resources.

Example::

    from authority.testing import assert_can, make_admin

    def test_admin_manages_posts(authority):
        authority.set_current_user(make_admin())
        authority.allow("manage", "Post")
        assert_can(authority, "manage", "Post")
"""

from authority.testing._actors import MockUser, make_admin, make_anonymous, make_user
from authority.testing._assertions import assert_can, assert_cannot
from authority.testing._fixtures import authority, authority_config, isolated_authority_state
from authority.testing._isolation import isolated_authority
from authority.testing._matrix import PermissionEntry, PermissionMatrix, permission_matrix

__all__ = [
    "MockUser",
    "PermissionEntry",
    "PermissionMatrix",
    "assert_can",
    "assert_cannot",
    "authority",
    "authority_config",
    "isolated_authority",
    "isolated_authority_state",
    "make_admin",
    "make_anonymous",
    "make_user",
    "permission_matrix",
]
