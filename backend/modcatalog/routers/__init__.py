"""
API routers.
"""
from modcatalog.routers import accounts, catalog, health, mods

__all__ = ["accounts", "catalog", "health", "mods"]
