"""explain_access() - explain why the current user can/can't perform an action."""

from __future__ import annotations

from typing import Any

from authority._authority import Authority
from authority.explain._models import AccessExplanation, RuleEvaluation

__all__ = ["explain_access"]


def explain_access(
    authority: Authority,
    action: str,
    resource: Any,
    resource_value: Any = None,
) -> AccessExplanation:
    """Explain the decision ``authority.can(action, resource, resource_value)`` makes.

    Every relevant rule is evaluated exactly as :meth:`Authority.can`
    evaluates it (conditions included), and the per-rule decisions are
    reported alongside the verdict. Neither logging nor
    ``on_missing_rule="raise"`` apply here.

    Example::

        explanation = explain_access(authority, "delete", post)
        print(explanation)
        assert explanation.decisive_rule.action == "delete"
    """
    tag = authority.tagger.tag_for(resource)
    if not isinstance(resource, (str, type)):
        resource_value = resource

    actions = authority.get_aliases_for_action(action)
    rules = authority.get_rules_for(action, tag)

    evaluations: list[RuleEvaluation] = []
    last_index = len(rules) - 1
    for index, rule in enumerate(rules):
        evaluations.append(
            RuleEvaluation(
                action=rule.action,
                resource=rule.resource,
                allow=rule.allow,
                has_condition=rule.has_condition,
                decision=rule.is_allowed(authority, resource_value),
                decisive=index == last_index,
            )
        )

    return AccessExplanation(
        user_repr=repr(authority.user),
        action=action,
        actions=actions,
        resource_type=tag,
        resource_repr=repr(resource_value),
        allowed=evaluations[-1].decision if evaluations else False,
        deny_by_default=not evaluations,
        rules=evaluations,
    )
