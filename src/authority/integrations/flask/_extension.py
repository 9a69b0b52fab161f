"""Flask extension that builds a per-request Authority."""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from flask import Flask, current_app, g, jsonify

from authority._authority import Authority
from authority._provision import ProvisionerRef, provision
from authority._resources import ResourceTagger
from authority.config._config import AuthorityConfig
from authority.exceptions import AuthorizationDenied, NoRuleError

__all__ = ["AuthorityExtension"]

F = TypeVar("F", bound=Callable[..., Any])

_EXTENSION_KEY = "authority"
_G_KEY = "_authority"


class AuthorityExtension:
    """Flask extension that wires an :class:`~authority.Authority` into requests.

    On first use within a request, an ``Authority`` is built for the
    user returned by ``user_provider``, every provisioner is run against
    it, and the result is cached on ``flask.g`` for the rest of the
    request. Provisioners come from the ``provisioners`` argument or,
    when that is omitted, from ``app.config["AUTHORITY_PROVISIONERS"]``
    (callables or import paths).

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        user_provider: A callable ``() -> user`` called within request
            context.
        provisioners: Optional provisioners overriding app config.
        config: Optional authority config for every per-request authority.
        tagger: Optional resource tagger for every per-request authority.

    Example::

        app = Flask(__name__)
        app.config["AUTHORITY_PROVISIONERS"] = ["myapp.permissions:provision"]
        authz = AuthorityExtension(app, user_provider=lambda: current_user)

        @app.post("/posts/<int:post_id>/publish")
        @authz.require("publish", "Post")
        def publish(post_id):
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        user_provider: Callable[[], Any],
        provisioners: Sequence[ProvisionerRef] | None = None,
        config: AuthorityConfig | None = None,
        tagger: ResourceTagger | None = None,
    ) -> None:
        self._user_provider = user_provider
        self._provisioners = provisioners
        self._config = config
        self._tagger = tagger

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores settings on ``app.extensions["authority"]`` and registers
        error handlers for authority exceptions.
        """
        provisioners = self._provisioners
        if provisioners is None:
            provisioners = app.config.get("AUTHORITY_PROVISIONERS", ())

        app.extensions[_EXTENSION_KEY] = {
            "user_provider": self._user_provider,
            "provisioners": list(provisioners),
            "config": self._config,
            "tagger": self._tagger,
        }

        @app.errorhandler(AuthorizationDenied)
        def handle_denied(exc: AuthorizationDenied):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 403

        @app.errorhandler(NoRuleError)
        def handle_no_rule(exc: NoRuleError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 500

    @property
    def authority(self) -> Authority:
        """The authority for the current request, built on first access.

        Must be accessed within a Flask request (or app) context.
        """
        cached: Authority | None = g.get(_G_KEY)
        if cached is not None:
            return cached

        ext_state: dict[str, Any] = current_app.extensions[_EXTENSION_KEY]
        user = ext_state["user_provider"]()
        built = provision(
            Authority(user, config=ext_state["config"], tagger=ext_state["tagger"]),
            ext_state["provisioners"],
        )
        setattr(g, _G_KEY, built)
        return built

    def require(self, action: str, resource: Any) -> Callable[[F], F]:
        """View decorator that aborts with 403 unless *action* on *resource* is allowed.

        Example::

            @app.delete("/posts/<int:post_id>")
            @authz.require("delete", "Post")
            def delete_post(post_id):
                ...
        """

        def decorator(view: F) -> F:
            @functools.wraps(view)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                self.authority.authorize(action, resource)
                return view(*args, **kwargs)

            return wrapper  # type: ignore[return-value]

        return decorator
