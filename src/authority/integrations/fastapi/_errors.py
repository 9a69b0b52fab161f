"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from authority.exceptions import AuthorizationDenied, NoRuleError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for authority errors on a FastAPI app.

    - ``AuthorizationDenied`` -> 403 Forbidden
    - ``NoRuleError`` -> 500 Internal Server Error

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(AuthorizationDenied)
    async def denied_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AuthorizationDenied
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NoRuleError)
    async def no_rule_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: NoRuleError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
