"""
Database connection management for MongoDB.

There is no shared client: each unit of work opens its own connection through
``mongo_session`` and the client is closed on every exit path.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from modcatalog.config import get_settings


def create_mongo_client(uri: Optional[str] = None) -> AsyncIOMotorClient:
    """Create a new MongoDB client."""
    settings = get_settings()
    return AsyncIOMotorClient(uri or settings.mongo_uri)


@asynccontextmanager
async def mongo_session(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
) -> AsyncIterator[AsyncIOMotorDatabase]:
    """
    Open a client, yield the catalog database and close the client.
    
    Usage:
        async with mongo_session() as db:
            store = ModStore(db)
            await store.find("Foo")
    """
    settings = get_settings()
    client = create_mongo_client(uri)
    try:
        yield client[db_name or settings.mongo_db_name]
    finally:
        client.close()
