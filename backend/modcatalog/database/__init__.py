"""
Database module - MongoDB sessions, collection definitions and query filters.
"""
from modcatalog.database.connections import create_mongo_client, mongo_session
from modcatalog.database.databases import catalog_db
from modcatalog.database.filters import InvalidFilterError, build_query, exact_name_pattern

__all__ = [
    "create_mongo_client",
    "mongo_session",
    "catalog_db",
    "InvalidFilterError",
    "build_query",
    "exact_name_pattern",
]
