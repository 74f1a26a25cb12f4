"""
Database dependencies for FastAPI routes.

Each request gets its own MongoDB client, closed when the response is done.
"""
from typing import AsyncIterator

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from modcatalog.database.connections import mongo_session
from modcatalog.services.mod_service import ModService
from modcatalog.stores.account_store import AccountStore
from modcatalog.stores.mod_store import ModStore


async def get_catalog_db() -> AsyncIterator[AsyncIOMotorDatabase]:
    """Yield the catalog database for the duration of one request."""
    async with mongo_session() as db:
        yield db


async def get_account_store(
    db: AsyncIOMotorDatabase = Depends(get_catalog_db),
) -> AccountStore:
    """Dependency to get AccountStore instance."""
    return AccountStore(db)


async def get_mod_store(
    db: AsyncIOMotorDatabase = Depends(get_catalog_db),
) -> ModStore:
    """Dependency to get ModStore instance."""
    return ModStore(db)


async def get_mod_service(
    db: AsyncIOMotorDatabase = Depends(get_catalog_db),
) -> ModService:
    """Dependency to get ModService instance."""
    return ModService(db)
