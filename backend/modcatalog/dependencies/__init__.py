"""
FastAPI dependencies.
"""
from modcatalog.dependencies.database import (
    get_account_store,
    get_catalog_db,
    get_mod_service,
    get_mod_store,
)

__all__ = [
    "get_account_store",
    "get_catalog_db",
    "get_mod_service",
    "get_mod_store",
]
