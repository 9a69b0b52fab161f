"""Authority - rule registration and the can/cannot query API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from authority._resources import ResourceTagger
from authority._types import Condition
from authority.config._config import AuthorityConfig, get_global_config
from authority.exceptions import AliasNotFoundError, AuthorizationDenied, NoRuleError
from authority.rules._alias import RuleAlias
from authority.rules._repository import RuleRepository
from authority.rules._rule import Rule

__all__ = ["Authority"]


class Authority:
    """Owns the rules and aliases for one user and answers permission queries.

    Rules are registered with :meth:`allow` and :meth:`deny`. A query
    expands the action through the alias table, keeps the rules relevant
    to the expanded actions and the resource tag, then evaluates them in
    registration order. The last relevant rule decides; with no relevant
    rule the answer is ``False``.

    Registration and querying may interleave freely. Nothing here is
    locked: hosts that share one authority across threads must register
    everything before querying concurrently, or synchronize externally.

    Args:
        current_user: The subject decisions are made for. Opaque to the
            engine; conditions read it through ``authority.user``.
        config: Optional config. Defaults to the global config, read at
            query time.
        tagger: Optional resource tagger used to derive tags from classes
            and instances. Defaults to class-name tagging.

    Example::

        authority = Authority(current_user)
        authority.add_alias("manage", ["create", "update", "delete"])
        authority.allow("manage", "Post")
        authority.deny("delete", "Post").when(lambda auth, post: post.locked)

        authority.can("update", "Post")      # True
        authority.can("delete", locked_post)  # False
    """

    def __init__(
        self,
        current_user: Any = None,
        *,
        config: AuthorityConfig | None = None,
        tagger: ResourceTagger | None = None,
    ) -> None:
        self._rules = RuleRepository()
        self._aliases: dict[str, RuleAlias] = {}
        self._config = config
        self._tagger = tagger if tagger is not None else ResourceTagger()
        self.set_current_user(current_user)

    # -- configuration ------------------------------------------------------

    @property
    def config(self) -> AuthorityConfig:
        """The effective config (explicit, else the current global one)."""
        return self._config if self._config is not None else get_global_config()

    @property
    def tagger(self) -> ResourceTagger:
        return self._tagger

    # -- queries ------------------------------------------------------------

    def can(self, action: str, resource: Any, resource_value: Any = None) -> bool:
        """Return whether the current user may perform *action* on *resource*.

        Args:
            action: The action name (e.g. ``"update"``).
            resource: A resource tag string, a class, or an instance. An
                instance is also passed to conditions as the resource value.
            resource_value: Value passed to conditions when *resource* is
                a tag string or a class.

        Returns:
            The decision of the last relevant rule, or ``False`` when no
            rule is relevant.

        Raises:
            NoRuleError: No rule is relevant and the config says
                ``on_missing_rule="raise"``.
        """
        tag, resource_value = self._normalize(resource, resource_value)
        actions = self.get_aliases_for_action(action)
        rules = self._rules.get_relevant_rules(actions, tag)
        config = self.config

        if rules.is_empty():
            if config.log_decisions:
                from authority._audit import log_decision

                log_decision(
                    action=action,
                    resource=tag,
                    actions=actions,
                    user=self._current_user,
                    rules=[],
                    allowed=False,
                )
            if config.on_missing_rule == "raise":
                raise NoRuleError(action=action, resource=tag)
            return False

        allowed = False
        for rule in rules:
            allowed = rule.is_allowed(self, resource_value)

        if config.log_decisions:
            from authority._audit import log_decision

            log_decision(
                action=action,
                resource=tag,
                actions=actions,
                user=self._current_user,
                rules=rules.all(),
                allowed=allowed,
            )
        return allowed

    def cannot(self, action: str, resource: Any, resource_value: Any = None) -> bool:
        """Negation of :meth:`can`."""
        return not self.can(action, resource, resource_value)

    def authorize(
        self,
        action: str,
        resource: Any,
        resource_value: Any = None,
        *,
        message: str | None = None,
    ) -> None:
        """Raise :class:`~authority.exceptions.AuthorizationDenied` unless permitted.

        Example::

            authority.authorize("update", post)  # raises if denied
        """
        if not self.can(action, resource, resource_value):
            raise AuthorizationDenied(
                user=self._current_user,
                action=action,
                resource=self._tagger.tag_for(resource),
                message=message,
            )

    def get_rules_for(self, action: str, resource: Any) -> RuleRepository:
        """Return the rules relevant to *action* (alias-expanded) on *resource*."""
        tag = self._tagger.tag_for(resource)
        return self._rules.get_relevant_rules(self.get_aliases_for_action(action), tag)

    def get_aliases_for_action(self, action: str) -> list[str]:
        """Return *action* followed by every alias name that includes it."""
        actions = [action]
        for name, alias in self._aliases.items():
            if alias.includes(action):
                actions.append(name)
        return actions

    # -- registration -------------------------------------------------------

    def allow(self, action: str, resource: Any, condition: Condition | None = None) -> Rule:
        """Register a rule that permits *action* on *resource*."""
        return self.add_rule(True, action, resource, condition)

    def deny(self, action: str, resource: Any, condition: Condition | None = None) -> Rule:
        """Register a rule that forbids *action* on *resource*."""
        return self.add_rule(False, action, resource, condition)

    def add_rule(
        self,
        allow: bool,
        action: str,
        resource: Any,
        condition: Condition | None = None,
    ) -> Rule:
        """Create a rule, append it to the repository and return it.

        *resource* may be a tag string (``"*"`` for any resource) or a
        class, which is converted to its tag.
        """
        rule = Rule(allow, action, self._tagger.tag_for(resource), condition)
        self._rules.add(rule)
        return rule

    def add_alias(self, name: str, actions: str | Iterable[str]) -> RuleAlias:
        """Register *name* as an alias for *actions*, replacing any previous one."""
        alias = RuleAlias(name, actions)
        self._aliases[name] = alias
        return alias

    # -- accessors ----------------------------------------------------------

    def get_rules(self) -> RuleRepository:
        return self._rules

    def get_aliases(self) -> dict[str, RuleAlias]:
        """Return a copy of the alias table."""
        return dict(self._aliases)

    def get_alias(self, name: str) -> RuleAlias | None:
        """Return the alias registered under *name*.

        Returns ``None`` for unknown names, or raises
        :class:`~authority.exceptions.AliasNotFoundError` when the config
        says ``on_missing_alias="raise"``.
        """
        alias = self._aliases.get(name)
        if alias is None and self.config.on_missing_alias == "raise":
            raise AliasNotFoundError(name=name)
        return alias

    def set_current_user(self, current_user: Any) -> None:
        self._current_user = current_user

    def get_current_user(self) -> Any:
        return self._current_user

    @property
    def user(self) -> Any:
        """The current user (same as :meth:`get_current_user`)."""
        return self._current_user

    # -- helpers ------------------------------------------------------------

    def _normalize(self, resource: Any, resource_value: Any) -> tuple[str, Any]:
        if isinstance(resource, str):
            return resource, resource_value
        if isinstance(resource, type):
            return self._tagger.tag_for(resource), resource_value
        # An instance is both the tag source and the value conditions see.
        return self._tagger.tag_for(resource), resource

    def __repr__(self) -> str:
        return (
            f"Authority(user={self._current_user!r}, rules={len(self._rules)}, "
            f"aliases={sorted(self._aliases)!r})"
        )
