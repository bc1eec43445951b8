"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from codeauthz.config._config import AuthzConfig, get_global_config
from codeauthz.exceptions import AuthorizationDenied, NoPolicyError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI, *, config: AuthzConfig | None = None) -> None:
    """Install exception handlers for codeauthz errors on a FastAPI app.

    Converts authorization exceptions into HTTP responses:

    - ``AuthorizationDenied`` -> ``denied_status_code`` (403 by default)
    - ``NoPolicyError`` -> ``missing_policy_status_code`` (500 by default)

    Args:
        app: The FastAPI application instance.
        config: Optional config for the status codes. Defaults to the
            global config at the time each error is handled.

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    def _config() -> AuthzConfig:
        return config if config is not None else get_global_config()

    @app.exception_handler(AuthorizationDenied)
    async def authz_denied_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AuthorizationDenied
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_config().denied_status_code,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NoPolicyError)
    async def no_policy_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: NoPolicyError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_config().missing_policy_status_code,
            content={"detail": str(exc)},
        )
