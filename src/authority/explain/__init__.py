"""Explain/dry-run mode - structured insight into authorization decisions."""

from authority.explain._access import explain_access
from authority.explain._models import AccessExplanation, RuleEvaluation

__all__ = ["AccessExplanation", "RuleEvaluation", "explain_access"]
