"""Data models for explain/dry-run output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["AccessExplanation", "RuleEvaluation"]


@dataclass(frozen=True, slots=True)
class RuleEvaluation:
    """Result of evaluating one relevant rule during an access check.

    Attributes:
        action: The action the rule is registered under.
        resource: The rule's resource tag (``"*"`` for any resource).
        allow: The rule's static decision.
        has_condition: Whether a condition produced ``decision``.
        decision: The rule's live decision for this check.
        decisive: True for the rule whose decision became the verdict.
    """

    action: str
    resource: str
    allow: bool
    has_condition: bool
    decision: bool
    decisive: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "action": self.action,
            "resource": self.resource,
            "allow": self.allow,
            "has_condition": self.has_condition,
            "decision": self.decision,
            "decisive": self.decisive,
        }


@dataclass(frozen=True, slots=True)
class AccessExplanation:
    """Explanation of why the current user can or cannot perform an action.

    Attributes:
        user_repr: String representation of the current user.
        action: The queried action.
        actions: The action plus every alias name that includes it.
        resource_type: The derived resource tag.
        resource_repr: String representation of the resource value.
        allowed: The verdict ``Authority.can`` returns.
        deny_by_default: True if no rule was relevant.
        rules: Per-rule evaluations in registration order.
    """

    user_repr: str
    action: str
    actions: list[str]
    resource_type: str
    resource_repr: str
    allowed: bool
    deny_by_default: bool
    rules: list[RuleEvaluation]

    @property
    def decisive_rule(self) -> RuleEvaluation | None:
        """The rule that decided the verdict, if any rule was relevant."""
        return self.rules[-1] if self.rules else None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "user_repr": self.user_repr,
            "action": self.action,
            "actions": list(self.actions),
            "resource_type": self.resource_type,
            "resource_repr": self.resource_repr,
            "allowed": self.allowed,
            "deny_by_default": self.deny_by_default,
            "rules": [r.to_dict() for r in self.rules],
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line explanation."""
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines: list[str] = []
        lines.append(f"Access Check: {verdict}")
        lines.append(f"  User: {self.user_repr}")
        lines.append(f"  Action: {self.action} (matches {', '.join(self.actions)})")
        lines.append(f"  Resource: {self.resource_type} ({self.resource_repr})")
        lines.append("")
        if self.deny_by_default:
            lines.append("  DENY BY DEFAULT (no relevant rules)")
        else:
            lines.append("  Rules (last one wins):")
            for r in self.rules:
                kind = "allow" if r.allow else "deny"
                result = "ALLOW" if r.decision else "DENY"
                condition = " when <condition>" if r.has_condition else ""
                marker = " <- decisive" if r.decisive else ""
                lines.append(f"    - {kind} {r.action} on {r.resource}{condition}: {result}{marker}")
        return "\n".join(lines)
