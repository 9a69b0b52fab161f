"""Shared protocols and type aliases for authority."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from authority._authority import Authority

__all__ = [
    "ANY_RESOURCE",
    "Condition",
    "OnMissingAlias",
    "OnMissingRule",
    "UserLike",
]

# Resource tag that matches every resource.
ANY_RESOURCE = "*"

# Valid values for AuthorityConfig.on_missing_rule.
OnMissingRule = Literal["deny", "raise"]

# Valid values for AuthorityConfig.on_missing_alias.
OnMissingAlias = Literal["none", "raise"]

# A rule condition receives the authority and the resource value under test.
Condition = Callable[["Authority", Any], bool]


@runtime_checkable
class UserLike(Protocol):
    """Structural type for users that carry an identifier.

    The engine treats the current user as opaque and never checks this
    protocol. ``MockUser`` from ``authority.testing`` satisfies it.

    Example::

        @dataclass
        class User:
            id: int
            name: str

        assert isinstance(User(id=1, name="Alice"), UserLike)
    """

    @property
    def id(self) -> int | str: ...
