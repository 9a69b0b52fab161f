"""Configuration module for authority."""

from __future__ import annotations

from authority.config._config import AuthorityConfig, configure, get_global_config

__all__ = ["AuthorityConfig", "configure", "get_global_config"]
