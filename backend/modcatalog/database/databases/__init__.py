"""
Database definitions and collection constants.
"""
from modcatalog.database.databases import catalog_db

__all__ = ["catalog_db"]
