"""Rule engine building blocks - rules, aliases, and the rule repository."""

from authority.rules._alias import RuleAlias
from authority.rules._repository import RuleRepository
from authority.rules._rule import Rule

__all__ = ["Rule", "RuleAlias", "RuleRepository"]
