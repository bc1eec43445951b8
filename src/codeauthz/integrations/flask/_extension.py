"""Flask extension for codeauthz authorization."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Flask, current_app, jsonify

from codeauthz._checks import authorize as _authorize
from codeauthz.config._config import AuthzConfig, get_global_config
from codeauthz.exceptions import AuthorizationDenied, NoPolicyError
from codeauthz.policy._registry import PolicyRegistry

__all__ = ["AuthzExtension"]


class AuthzExtension:
    """Flask extension that enforces a registry within request context.

    Registers error handlers for authorization exceptions and provides
    ``enforce()`` and ``authorize()`` methods that resolve the current
    subject through ``subject_provider``.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        subject_provider: A callable ``() -> subject`` that returns the
            current subject. Called within request context.
        registry: The policy registry to enforce.
        config: Optional config for the error status codes. Defaults to
            the global config.

    Example::

        app = Flask(__name__)
        authz = AuthzExtension(
            app,
            subject_provider=lambda: g.user,
            registry=documents,
        )

        @app.delete("/documents/<doc_id>")
        def delete_document(doc_id):
            doc = DOCUMENTS[doc_id]
            authz.authorize("delete", doc)
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        subject_provider: Callable[[], Any],
        registry: PolicyRegistry[Any, Any],
        config: AuthzConfig | None = None,
    ) -> None:
        self._subject_provider = subject_provider
        self._registry = registry
        self._config = config

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores configuration on ``app.extensions["codeauthz"]`` and
        registers error handlers for authorization exceptions.

        Args:
            app: The Flask application instance.
        """
        app.extensions["codeauthz"] = {
            "subject_provider": self._subject_provider,
            "registry": self._registry,
            "config": self._config,
        }

        def _config() -> AuthzConfig:
            return self._config if self._config is not None else get_global_config()

        @app.errorhandler(AuthorizationDenied)
        def handle_authz_denied(exc: AuthorizationDenied):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), _config().denied_status_code

        @app.errorhandler(NoPolicyError)
        def handle_no_policy(exc: NoPolicyError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), _config().missing_policy_status_code

    def _state(self) -> tuple[Any, PolicyRegistry[Any, Any]]:
        ext_state: dict[str, Any] = current_app.extensions["codeauthz"]
        subject_provider: Callable[[], Any] = ext_state["subject_provider"]
        return subject_provider(), ext_state["registry"]

    def enforce(self, action: str, target: Any) -> bool:
        """Return whether the current subject may perform *action* on *target*.

        Must be called within a Flask request context.

        Raises:
            NoPolicyError: If no policy is registered for *action*.
        """
        subject, registry = self._state()
        return registry.enforce(subject, action, target)

    def authorize(self, action: str, target: Any, *, message: str | None = None) -> None:
        """Raise ``AuthorizationDenied`` unless the current subject may act on *target*.

        Must be called within a Flask request context. The registered
        error handler turns the exception into a JSON error response.

        Example::

            @app.post("/users/<user_id>/profile")
            def update_profile(user_id):
                authz.authorize("update:profile", USERS[user_id])
                ...
        """
        subject, registry = self._state()
        _authorize(registry, subject, action, target, message=message)
