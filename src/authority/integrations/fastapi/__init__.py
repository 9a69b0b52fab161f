"""FastAPI integration for authority."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install authority-rules[fastapi]"
    ) from exc

from authority.integrations.fastapi._dependencies import (
    AuthorityDep,
    configure_authority,
    get_authority,
    get_current_user,
)
from authority.integrations.fastapi._errors import install_error_handlers

__all__ = [
    "AuthorityDep",
    "configure_authority",
    "get_authority",
    "get_current_user",
    "install_error_handlers",
]
