"""authority - in-process rule-based authorization.

Register allow/deny rules against an :class:`Authority`, group actions
under aliases, and ask whether the current user can act on a resource.
The last relevant rule wins; with no relevant rule the answer is no.

Example::

    from authority import Authority

    authority = Authority(current_user)
    authority.add_alias("manage", ["create", "update", "delete"])
    authority.allow("manage", "Post")
    authority.deny("delete", "Post").when(lambda auth, post: post.locked)

    authority.can("update", "Post")  # True
    authority.can("delete", post)     # False when post.locked
"""

from importlib.metadata import PackageNotFoundError, version

from authority._authority import Authority
from authority._global import get_authority, init_authority, reset_authority
from authority._provision import provision, resolve_provisioner
from authority._resources import ResourceTagger, resource_tag
from authority._types import ANY_RESOURCE, Condition, UserLike
from authority.config._config import AuthorityConfig, configure
from authority.exceptions import (
    AliasNotFoundError,
    AuthorityError,
    AuthorityNotInitializedError,
    AuthorizationDenied,
    NoRuleError,
    ProvisionerError,
)
from authority.explain._access import explain_access
from authority.rules._alias import RuleAlias
from authority.rules._repository import RuleRepository
from authority.rules._rule import Rule

try:
    __version__ = version("authority-rules")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "ANY_RESOURCE",
    "AliasNotFoundError",
    "Authority",
    "AuthorityConfig",
    "AuthorityError",
    "AuthorityNotInitializedError",
    "AuthorizationDenied",
    "Condition",
    "NoRuleError",
    "ProvisionerError",
    "ResourceTagger",
    "Rule",
    "RuleAlias",
    "RuleRepository",
    "UserLike",
    "configure",
    "explain_access",
    "get_authority",
    "init_authority",
    "provision",
    "reset_authority",
    "resolve_provisioner",
    "resource_tag",
]
