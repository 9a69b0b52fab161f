"""FastAPI dependencies for authority."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from fastapi import Depends, FastAPI, Request

from authority._authority import Authority
from authority._provision import ProvisionerRef, provision
from authority._resources import ResourceTagger
from authority.config._config import AuthorityConfig

__all__ = ["AuthorityDep", "configure_authority", "get_authority", "get_current_user"]


# ---------------------------------------------------------------------------
# Sentinel dependency for DI-based configuration
# ---------------------------------------------------------------------------


def get_current_user(request: Request) -> Any:
    """Sentinel dependency - override via ``app.dependency_overrides[get_current_user]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their identity provider before using ``AuthorityDep``.

    Example::

        from authority.integrations.fastapi import get_current_user

        app.dependency_overrides[get_current_user] = my_get_current_user
    """
    raise NotImplementedError(
        "Override get_current_user via app.dependency_overrides[get_current_user]."
    )


# ---------------------------------------------------------------------------
# Application wiring
# ---------------------------------------------------------------------------


def configure_authority(
    app: FastAPI,
    *,
    provisioners: Sequence[ProvisionerRef] = (),
    config: AuthorityConfig | None = None,
    tagger: ResourceTagger | None = None,
) -> None:
    """Store the provisioners used to build each request's authority.

    Example::

        app = FastAPI()
        configure_authority(app, provisioners=["myapp.permissions:provision"])
    """
    app.state.authority_provisioners = list(provisioners)
    app.state.authority_config = config
    app.state.authority_tagger = tagger


def get_authority(
    request: Request,
    user: Any = Depends(get_current_user),
) -> Authority:
    """Dependency that builds an :class:`~authority.Authority` for the request.

    Runs the provisioners stored by :func:`configure_authority` (none if
    the app was never configured). FastAPI caches dependencies per
    request, so every ``Depends(get_authority)`` in one request shares
    the same instance.

    Example::

        @app.get("/posts/{post_id}")
        def read_post(post_id: int, authority: Authority = Depends(get_authority)):
            post = load_post(post_id)
            authority.authorize("read", post)
            return post
    """
    app_state = request.app.state
    authority = Authority(
        user,
        config=getattr(app_state, "authority_config", None),
        tagger=getattr(app_state, "authority_tagger", None),
    )
    return provision(authority, getattr(app_state, "authority_provisioners", ()))


def _make_dependency(action: str, resource: Any) -> Callable[..., Authority]:
    """Build the dependency function for a given action/resource check."""

    def _check(authority: Authority = Depends(get_authority)) -> Authority:
        authority.authorize(action, resource)
        return authority

    return _check


def AuthorityDep(action: str, resource: Any) -> Any:
    """FastAPI dependency that requires *action* on *resource*.

    Resolves to the request's ``Authority`` when allowed; raises
    ``AuthorizationDenied`` (403 with ``install_error_handlers``) when not.

    Example::

        @app.post("/posts")
        def create_post(
            payload: PostIn,
            authority: Authority = AuthorityDep("create", "Post"),
        ) -> dict:
            ...
    """
    return Depends(_make_dependency(action, resource))
