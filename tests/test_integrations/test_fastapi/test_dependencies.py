"""Tests for the FastAPI AuthzDep dependency."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from codeauthz.integrations.fastapi._dependencies import AuthzDep, get_subject
from codeauthz.integrations.fastapi._errors import install_error_handlers
from codeauthz.policy._registry import PolicyRegistry
from tests._models import User

USERS = {
    "alice": User(id="alice"),
    "bob": User(id="bob"),
    "root": User(id="root", is_admin=True),
}


def load_user(user_id: str) -> User:
    try:
        return USERS[user_id]
    except KeyError:
        raise HTTPException(status_code=404, detail="Not found") from None


def make_app(registry: PolicyRegistry[User, User], current: User | None) -> FastAPI:
    app = FastAPI()
    install_error_handlers(app)

    @app.put("/users/{user_id}/profile")
    def update_profile(
        user: User = AuthzDep(registry, "update:profile", target=load_user),
    ) -> dict:
        return {"updated": user.id}

    @app.post("/users/{user_id}/archive")
    def archive(user: User = AuthzDep(registry, "archive", target=load_user)) -> dict:
        return {"archived": user.id}

    if current is not None:
        app.dependency_overrides[get_subject] = lambda: current
    return app


class TestAuthzDep:
    def test_permitted_returns_target(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, USERS["alice"]))
        response = client.put("/users/alice/profile")
        assert response.status_code == 200
        assert response.json() == {"updated": "alice"}

    def test_admin_permitted_on_other(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, USERS["root"]))
        assert client.put("/users/bob/profile").status_code == 200

    def test_denied_returns_403(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, USERS["alice"]))
        response = client.put("/users/bob/profile")
        assert response.status_code == 403
        assert "not authorized" in response.json()["detail"]

    def test_target_dependency_errors_pass_through(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, USERS["alice"]))
        assert client.put("/users/nobody/profile").status_code == 404

    def test_missing_policy_returns_500(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, USERS["root"]))
        response = client.post("/users/bob/archive")
        assert response.status_code == 500
        assert "archive" in response.json()["detail"]

    def test_subject_provider_must_be_overridden(self, user_registry) -> None:
        client = TestClient(make_app(user_registry, None))
        with pytest.raises(NotImplementedError, match="get_subject"):
            client.put("/users/alice/profile")
