"""
Index management.
Ensures lookup indexes exist on startup.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from modcatalog.core.logging import get_logger
from modcatalog.database.databases.catalog_db import Collections

logger = get_logger("registry")


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the catalog collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Index might already exist with different options
                logger.debug(f"Index on {collection_name} {keys} not created: {e}")
