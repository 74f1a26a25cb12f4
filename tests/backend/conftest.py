"""
Backend-specific test fixtures.

These fixtures extend the global fixtures with a database whose every call
fails, for exercising the storage-fault paths of the stores.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Storage Fault Fixtures
# =============================================================================

@pytest.fixture
def failing_collection():
    """
    A collection mock whose reads and writes all raise a transport error.
    """
    error = ServerSelectionTimeoutError("localhost:27017: connection refused")
    collection = MagicMock()
    for method in (
        "find_one",
        "insert_one",
        "insert_many",
        "update_one",
        "delete_one",
        "delete_many",
        "count_documents",
    ):
        setattr(collection, method, AsyncMock(side_effect=error))
    collection.find.return_value.to_list = AsyncMock(side_effect=error)
    return collection


@pytest.fixture
def failing_db(failing_collection):
    """A database mock returning ``failing_collection`` for every name."""
    db = MagicMock()
    db.__getitem__.return_value = failing_collection
    return db
