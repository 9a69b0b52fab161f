"""Audit logging for authorization decisions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from authority.rules._rule import Rule

__all__ = ["log_decision"]

logger = logging.getLogger("authority")


def log_decision(
    *,
    action: str,
    resource: str,
    actions: Sequence[str],
    user: object,
    rules: Sequence[Rule],
    allowed: bool,
) -> None:
    """Log an authorization decision.

    Logging levels:
    - INFO: Summary (action, resource, rule count, verdict)
    - DEBUG: Detailed (expanded actions, each relevant rule)
    - WARNING: No relevant rule (deny-by-default applied)
    """
    rule_count = len(rules)

    if rule_count == 0:
        logger.warning(
            "No rule relevant to (%s, %r) - deny-by-default applied",
            resource,
            action,
        )
        return

    logger.info(
        "Decision: %s.%s - %s after %d rule(s) for user %r",
        resource,
        action,
        "allowed" if allowed else "denied",
        rule_count,
        user,
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Rules matched for %s.%s (actions=%s): %s",
            resource,
            action,
            list(actions),
            list(rules),
        )
