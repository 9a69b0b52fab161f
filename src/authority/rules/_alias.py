"""RuleAlias - a named group of actions."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["RuleAlias"]


class RuleAlias:
    """Lets one alias name stand for several concrete actions.

    A rule registered under the alias name is relevant to a query for
    any action the alias includes.

    Example::

        manage = RuleAlias("manage", ["create", "update", "delete"])
        assert manage.includes("update")
    """

    __slots__ = ("_name", "_actions")

    def __init__(self, name: str, actions: str | Iterable[str]) -> None:
        self._name = name
        if isinstance(actions, str):
            self._actions = frozenset((actions,))
        else:
            self._actions = frozenset(actions)

    @property
    def name(self) -> str:
        return self._name

    @property
    def actions(self) -> frozenset[str]:
        return self._actions

    def includes(self, action: str) -> bool:
        """Return ``True`` if the alias stands for *action*."""
        return action in self._actions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleAlias):
            return NotImplemented
        return self._name == other._name and self._actions == other._actions

    def __hash__(self) -> int:
        return hash((self._name, self._actions))

    def __repr__(self) -> str:
        return f"RuleAlias({self._name!r}, {sorted(self._actions)!r})"
