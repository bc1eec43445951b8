"""FastAPI integration for codeauthz."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install codeauthz[fastapi]"
    ) from exc

from codeauthz.integrations.fastapi._dependencies import AuthzDep, get_subject
from codeauthz.integrations.fastapi._errors import install_error_handlers

__all__ = [
    "AuthzDep",
    "get_subject",
    "install_error_handlers",
]
