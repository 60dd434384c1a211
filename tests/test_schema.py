"""Startup schema tests: collections resolve through the configured names."""

import pytest
from pymongo.errors import DuplicateKeyError

from app.database.conn import mongo_client
from app.database.schema import ensure_collections_and_indexes
from config import database_config


async def test_indexes_created_on_configured_collections(db, monkeypatch) -> None:
    monkeypatch.setitem(database_config, "PROJECT_COLLECTION", "portfolio_projects")

    await ensure_collections_and_indexes()

    project_indexes = await db["portfolio_projects"].index_information()
    assert "idx_project_order" in project_indexes


async def test_user_email_is_unique_after_startup(db, users_col) -> None:
    await ensure_collections_and_indexes()
    await users_col.insert_one({"email": "owner@example.com"})

    with pytest.raises(DuplicateKeyError):
        await users_col.insert_one({"email": "owner@example.com"})


async def test_ensure_is_idempotent(db) -> None:
    await ensure_collections_and_indexes()
    await ensure_collections_and_indexes()

    assert "uniq_user_email" in await mongo_client.collection("USER_COLLECTION").index_information()


def test_unknown_collection_key_is_rejected() -> None:
    with pytest.raises(KeyError, match="NOPE_COLLECTION"):
        mongo_client.collection_name("NOPE_COLLECTION")
