"""Shared test fixtures.

Environment is set before any app import so config.py picks it up. Each test
gets a fresh in-memory motor-compatible database wired into the global
``mongo_client`` singleton; no MongoDB server is needed.
"""

import os

os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["OWNER_EMAIL"] = "owner@example.com"
os.environ["ADMIN_PASS"] = "admin-pass"
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.database.conn import mongo_client
from app.models.user.user import User, UserOut
from app.services.auth.auth_utils import create_access_token
from app.services.user_management.user_helper import seed_owner_helper
from main import app
from tests.helpers import OWNER_EMAIL, OWNER_PASSWORD


@pytest.fixture
async def db():
    """Point the mongo_client singleton at a fresh mock database."""
    client = AsyncMongoMockClient()
    mongo_client._client = client
    mongo_client._db = client["portfolio_test"]
    yield mongo_client._db
    mongo_client._client = None
    mongo_client._db = None


@pytest.fixture
async def owner(db) -> UserOut:
    """Seed the owner user that holds project references."""
    return await seed_owner_helper(User(email=OWNER_EMAIL, password=OWNER_PASSWORD))


@pytest.fixture
def projects_col(db):
    return db["projects"]


@pytest.fixture
def users_col(db):
    return db["users"]


@pytest.fixture
def insert_project(projects_col):
    """Insert a raw project document and return its ObjectId."""

    async def _insert(name: str = "Project", order: int = 0, **fields):
        doc = {
            "project_name": name,
            "small_description": f"{name} in short",
            "description": f"{name} in full",
            "skills": [],
            "project_repository": "",
            "project_live_link": "",
            "project_video": "",
            "images": [],
            "order": order,
            "created_at": datetime.now(timezone.utc),
            "updated_at": datetime.now(timezone.utc),
        }
        doc.update(fields)
        result = await projects_col.insert_one(doc)
        return result.inserted_id

    return _insert


@pytest.fixture
async def client(db) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict:
    token = create_access_token({"sub": "test-owner", "scope": "admin"})
    return {"Authorization": f"Bearer {token}"}
