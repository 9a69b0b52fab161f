"""Explicit process-wide authority handle.

Code that can receive an :class:`~authority.Authority` as an argument
should. For hosts that need one shared instance, this module keeps a
single handle with an explicit lifecycle:

- ``init_authority()`` builds and stores it (call once at startup),
- ``get_authority()`` returns it, failing loudly if it was never built,
- ``reset_authority()`` drops it (teardown, tests).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from authority._authority import Authority
from authority._provision import ProvisionerRef, provision
from authority._resources import ResourceTagger
from authority.config._config import AuthorityConfig
from authority.exceptions import AuthorityNotInitializedError

__all__ = ["get_authority", "init_authority", "reset_authority"]

_authority: Authority | None = None


def init_authority(
    current_user: Any = None,
    provisioners: Iterable[ProvisionerRef] = (),
    *,
    config: AuthorityConfig | None = None,
    tagger: ResourceTagger | None = None,
) -> Authority:
    """Build the process-wide authority, run *provisioners* on it, and store it.

    Replaces any previously stored authority.

    Example::

        init_authority(None, ["myapp.permissions:provision"])
        get_authority().set_current_user(user)
    """
    global _authority
    _authority = provision(Authority(current_user, config=config, tagger=tagger), provisioners)
    return _authority


def get_authority() -> Authority:
    """Return the process-wide authority.

    Raises:
        AuthorityNotInitializedError: ``init_authority()`` has not run.
    """
    if _authority is None:
        raise AuthorityNotInitializedError(
            "No process-wide authority; call init_authority() during startup"
        )
    return _authority


def reset_authority() -> None:
    """Drop the process-wide authority."""
    global _authority
    _authority = None


def _swap_authority(authority: Authority | None) -> Authority | None:
    """Install *authority* as the handle and return the previous one. For testing only."""
    global _authority
    previous = _authority
    _authority = authority
    return previous
