"""Exception hierarchy for authority."""

from __future__ import annotations

__all__ = [
    "AliasNotFoundError",
    "AuthorityError",
    "AuthorityNotInitializedError",
    "AuthorizationDenied",
    "NoRuleError",
    "ProvisionerError",
]


class AuthorityError(Exception):
    """Base exception for all authority errors."""


class AuthorizationDenied(AuthorityError):  # noqa: N818
    """The current user is not allowed to perform the requested action.

    Attributes:
        user: The user that was denied.
        action: The action that was attempted.
        resource: The resource tag involved.

    Example::

        try:
            authority.authorize("delete", post)
        except AuthorizationDenied as exc:
            print(f"{exc.user} cannot {exc.action} {exc.resource}")
    """

    def __init__(
        self,
        *,
        user: object,
        action: str,
        resource: str,
        message: str | None = None,
    ) -> None:
        self.user = user
        self.action = action
        self.resource = resource
        if message is None:
            message = f"User {user!r} is not authorized to {action} {resource}"
        super().__init__(message)


class NoRuleError(AuthorityError):
    """No rule is relevant to (action, resource).

    Raised only when configured with ``on_missing_rule="raise"``; the
    default is to deny.

    Attributes:
        action: The queried action.
        resource: The queried resource tag.
    """

    def __init__(self, *, action: str, resource: str) -> None:
        self.action = action
        self.resource = resource
        super().__init__(f"No rule registered for ({resource}, {action!r})")


class AliasNotFoundError(AuthorityError, KeyError):
    """An alias lookup named an alias that was never registered.

    Raised only when configured with ``on_missing_alias="raise"``.

    Attributes:
        name: The alias name that was looked up.
    """

    def __init__(self, *, name: str) -> None:
        self.name = name
        super().__init__(f"No alias registered under {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class ProvisionerError(AuthorityError):
    """A provisioner could not be resolved or is not callable."""


class AuthorityNotInitializedError(AuthorityError):
    """The process-wide authority was requested before ``init_authority()``."""
