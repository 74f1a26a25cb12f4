"""
Service layer for business logic.
"""
from modcatalog.services.mod_service import ModService
from modcatalog.services.tag_service import reconcile_tags

__all__ = [
    "ModService",
    "reconcile_tags",
]
