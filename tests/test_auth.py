"""Tests for owner login and bearer token handling."""

import pytest
from httpx import AsyncClient

from app.services.auth.auth_utils import hash_password, verify_access_token, verify_password
from tests.helpers import OWNER_EMAIL, OWNER_PASSWORD, project_payload


def _login(email: str = OWNER_EMAIL, password: str = OWNER_PASSWORD, admin_pass: str = "admin-pass") -> dict:
    return {"email": email, "password": password, "admin_pass": admin_pass}


async def test_login_returns_admin_token(client: AsyncClient, owner) -> None:
    response = await client.post("/api/admin/auth", json=_login())

    assert response.status_code == 200
    data = response.json()["data"]
    claims = verify_access_token(data["token"])
    assert claims["scope"] == "admin"
    assert claims["sub"] == owner.id
    assert data["data"]["email"] == OWNER_EMAIL
    assert "password" not in data["data"]


async def test_login_token_authorizes_admin_routes(client: AsyncClient, owner) -> None:
    token = (await client.post("/api/admin/auth", json=_login())).json()["data"]["token"]

    response = await client.post(
        "/api/projects",
        json=project_payload(),
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 200


@pytest.mark.parametrize(
    "payload",
    [
        _login(password="wrong-password"),
        _login(email="stranger@example.com"),
        _login(admin_pass="wrong-admin-pass"),
    ],
)
async def test_login_rejects_bad_credentials(client: AsyncClient, owner, payload: dict) -> None:
    response = await client.post("/api/admin/auth", json=payload)

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("s3cret")

    assert verify_password("s3cret", hashed)
    assert not verify_password("other", hashed)
    assert not verify_password("s3cret", "")
