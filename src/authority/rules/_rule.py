"""Rule - a single allow/deny decision for an (action, resource) pair."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Any

from authority._types import ANY_RESOURCE, Condition

if TYPE_CHECKING:
    from authority._authority import Authority

__all__ = ["Rule"]


class Rule:
    """An allow or deny decision bound to one action and one resource tag.

    The action, resource and base decision are fixed at construction.
    The only mutation is attaching or replacing the condition through
    :meth:`when`, which lets rules be refined after registration.

    Attributes:
        allow: Base decision when the rule fires without a condition.
        action: The action name the rule was registered under.
        resource: The resource tag, or ``"*"`` for any resource.
        condition: Optional ``(authority, resource_value) -> bool``
            callable. When set, its result replaces ``allow``.

    Example::

        rule = authority.allow("update", "Post")
        rule.when(lambda auth, post: post.author_id == auth.user.id)
    """

    __slots__ = ("_allow", "_action", "_resource", "_condition")

    def __init__(
        self,
        allow: bool,
        action: str,
        resource: str,
        condition: Condition | None = None,
    ) -> None:
        self._allow = bool(allow)
        self._action = action
        self._resource = resource
        self._condition = condition

    @property
    def allow(self) -> bool:
        return self._allow

    @property
    def action(self) -> str:
        return self._action

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def condition(self) -> Condition | None:
        return self._condition

    @property
    def has_condition(self) -> bool:
        """Whether a condition overrides the static decision."""
        return self._condition is not None

    def when(self, condition: Condition) -> Rule:
        """Attach (or replace) the rule's condition and return the rule.

        Example::

            authority.deny("delete", "Post").when(lambda auth, post: post.locked)
        """
        self._condition = condition
        return self

    def is_relevant(self, actions: Collection[str], resource: str) -> bool:
        """Return ``True`` if this rule applies to any of *actions* on *resource*.

        Args:
            actions: The expanded action set of a query (the action itself
                plus every alias that includes it).
            resource: The queried resource tag.
        """
        if self._action not in actions:
            return False
        return self._resource == resource or self._resource == ANY_RESOURCE

    def is_allowed(self, authority: Authority, resource_value: Any = None) -> bool:
        """Return the live decision of this rule.

        If a condition is set it fully determines the outcome, in either
        direction. Errors raised by the condition propagate to the caller.
        """
        if self._condition is not None:
            return bool(self._condition(authority, resource_value))
        return self._allow

    def __repr__(self) -> str:
        kind = "allow" if self._allow else "deny"
        suffix = ", conditional" if self._condition is not None else ""
        return f"Rule({kind} {self._action!r} on {self._resource!r}{suffix})"
