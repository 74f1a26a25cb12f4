"""
Global test fixtures for ModCatalog.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Account and mod factories
- FastAPI test clients wired to the mock database
"""

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_catalog_db():
    """
    Create an in-memory catalog database using mongomock-motor.

    The client does no real I/O, so the same database can be shared by
    async tests and by the TestClient's event loop.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client["test_catalog"]
    client.close()


@pytest.fixture
def account_store(mock_catalog_db):
    """AccountStore backed by the mock database."""
    from modcatalog.stores.account_store import AccountStore
    return AccountStore(mock_catalog_db)


@pytest.fixture
def mod_store(mock_catalog_db):
    """ModStore backed by the mock database."""
    from modcatalog.stores.mod_store import ModStore
    return ModStore(mock_catalog_db)


# =============================================================================
# Record Factories
# =============================================================================

@pytest.fixture
def make_account():
    """Factory for Account records."""
    from modcatalog.models.account import Account

    def _make(username: str = "alice", password: str = "secret", **kwargs):
        return Account(username=username, password=password, **kwargs)

    return _make


@pytest.fixture
def make_mod():
    """Factory for Mod records with realistic defaults."""
    from modcatalog.models.mod import Mod

    def _make(mod_name: str = "Foo", **kwargs):
        fields = {
            "author": "alice",
            "desc": "Adds more foo",
            "date_created": "2022/11/01",
            "date_modified": "2022/11/02",
            "url": "https://example.com/foo.zip",
            "game_name": "Minecraft",
            "tags": ["a", "b"],
            "icon": "foo.png",
            "slug": "foo, more foo",
        }
        fields.update(kwargs)
        return Mod(mod_name=mod_name, **fields)

    return _make


@pytest.fixture
def mod_payload() -> dict:
    """A mod upload body as a client sends it (camelCase fields)."""
    return {
        "modName": "Foo",
        "author": "alice",
        "desc": "Adds more foo",
        "dateCreated": "2022/11/01",
        "dateModified": "2022/11/02",
        "url": "https://example.com/foo.zip",
        "gameName": "Minecraft",
        "tags": ["a", "b"],
        "views": 0,
        "icon": "foo.png",
        "likes": 0,
        "comments": [],
        "slug": "foo, more foo",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_catalog_db):
    """
    FastAPI app with every database session replaced by the mock database.

    Both the per-request dependency and the startup session are patched, so
    no test ever opens a real MongoDB connection.
    """
    from modcatalog.dependencies.database import get_catalog_db
    from modcatalog.main import app as fastapi_app

    @asynccontextmanager
    async def _mock_session(*args, **kwargs):
        yield mock_catalog_db

    async def _mock_get_catalog_db():
        yield mock_catalog_db

    fastapi_app.dependency_overrides[get_catalog_db] = _mock_get_catalog_db
    with patch("modcatalog.main.mongo_session", _mock_session):
        yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c
