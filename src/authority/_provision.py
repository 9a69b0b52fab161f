"""Provisioners - callables that register rules and aliases on an authority."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable
from typing import Any, Union

from authority._authority import Authority
from authority.exceptions import ProvisionerError

__all__ = ["Provisioner", "ProvisionerRef", "provision", "resolve_provisioner"]

logger = logging.getLogger("authority")

# A provisioner receives the authority and registers rules on it. Classes
# whose constructor takes the authority qualify as well.
Provisioner = Callable[[Authority], Any]

# What configuration may name: the provisioner itself or an import path.
ProvisionerRef = Union[Provisioner, str]


def resolve_provisioner(ref: ProvisionerRef) -> Provisioner:
    """Return the provisioner named by *ref*.

    Strings are import paths, either ``"package.module:attr"`` or
    ``"package.module.attr"``. Anything else must already be callable.

    Raises:
        ProvisionerError: The path cannot be imported, the attribute is
            missing, or the result is not callable.

    Example::

        fn = resolve_provisioner("myapp.permissions:provision_posts")
        fn(authority)
    """
    if isinstance(ref, str):
        if ":" in ref:
            module_name, _, attr = ref.partition(":")
        else:
            module_name, _, attr = ref.rpartition(".")
        if not module_name or not attr:
            raise ProvisionerError(f"Invalid provisioner path {ref!r}")
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise ProvisionerError(f"Cannot import provisioner module {module_name!r}") from exc
        try:
            target = getattr(module, attr)
        except AttributeError as exc:
            raise ProvisionerError(f"Module {module_name!r} has no attribute {attr!r}") from exc
    else:
        target = ref

    if not callable(target):
        raise ProvisionerError(f"Provisioner {ref!r} is not callable")
    return target


def provision(authority: Authority, provisioners: Iterable[ProvisionerRef]) -> Authority:
    """Run every provisioner against *authority*, in order, and return it.

    Example::

        def post_rules(authority):
            authority.allow("read", "Post")

        authority = provision(Authority(user), [post_rules, "myapp.rules:admin"])
    """
    for ref in provisioners:
        provisioner = resolve_provisioner(ref)
        logger.debug("Running provisioner %r", provisioner)
        provisioner(authority)
    return authority
