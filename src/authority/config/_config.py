"""Layered configuration for authority."""

from __future__ import annotations

from dataclasses import dataclass

from authority._types import OnMissingAlias, OnMissingRule

__all__ = [
    "AuthorityConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_MISSING_RULE: set[str] = {"deny", "raise"}
_VALID_MISSING_ALIAS: set[str] = {"none", "raise"}


@dataclass(frozen=True, slots=True)
class AuthorityConfig:
    """Engine configuration with merge semantics (global -> authority).

    Attributes:
        on_missing_rule: Behavior when no rule is relevant to a query.
            ``"deny"`` returns ``False``.
            ``"raise"`` raises ``NoRuleError``.
        on_missing_alias: Behavior of ``Authority.get_alias`` for an
            unknown name. ``"none"`` returns ``None``, ``"raise"`` raises
            ``AliasNotFoundError``.
        log_decisions: Log every decision through the ``authority`` logger.

    Example::

        config = AuthorityConfig(on_missing_rule="raise")
        merged = config.merge(log_decisions=True)
    """

    on_missing_rule: OnMissingRule = "deny"
    on_missing_alias: OnMissingAlias = "none"
    log_decisions: bool = False

    def __post_init__(self) -> None:
        if self.on_missing_rule not in _VALID_MISSING_RULE:
            raise ValueError(
                f"on_missing_rule must be one of {_VALID_MISSING_RULE!r}, "
                f"got {self.on_missing_rule!r}"
            )
        if self.on_missing_alias not in _VALID_MISSING_ALIAS:
            raise ValueError(
                f"on_missing_alias must be one of {_VALID_MISSING_ALIAS!r}, "
                f"got {self.on_missing_alias!r}"
            )

    def merge(
        self,
        *,
        on_missing_rule: OnMissingRule | None = None,
        on_missing_alias: OnMissingAlias | None = None,
        log_decisions: bool | None = None,
    ) -> AuthorityConfig:
        """Return a new config with non-None overrides applied.

        Args:
            on_missing_rule: Override for on_missing_rule (ignored if None).
            on_missing_alias: Override for on_missing_alias (ignored if None).
            log_decisions: Override for log_decisions (ignored if None).

        Returns:
            A new ``AuthorityConfig`` with overrides merged.
        """
        return AuthorityConfig(
            on_missing_rule=(
                on_missing_rule if on_missing_rule is not None else self.on_missing_rule
            ),
            on_missing_alias=(
                on_missing_alias if on_missing_alias is not None else self.on_missing_alias
            ),
            log_decisions=(log_decisions if log_decisions is not None else self.log_decisions),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AuthorityConfig()


def get_global_config() -> AuthorityConfig:
    """Return the current global configuration.

    Authorities constructed without an explicit config read this at
    query time, so ``configure()`` affects them immediately.
    """
    return _global_config


def configure(
    *,
    on_missing_rule: OnMissingRule | None = None,
    on_missing_alias: OnMissingAlias | None = None,
    log_decisions: bool | None = None,
) -> AuthorityConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(on_missing_rule="raise")
        # Queries with no relevant rule now raise NoRuleError
    """
    global _global_config
    _global_config = _global_config.merge(
        on_missing_rule=on_missing_rule,
        on_missing_alias=on_missing_alias,
        log_decisions=log_decisions,
    )
    return _global_config


def _set_global_config(cfg: AuthorityConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AuthorityConfig()
