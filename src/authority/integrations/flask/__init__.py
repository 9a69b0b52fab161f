"""Flask integration for authority."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install authority-rules[flask]"
    ) from exc

from authority.integrations.flask._extension import AuthorityExtension

__all__ = ["AuthorityExtension"]
