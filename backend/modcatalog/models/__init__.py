"""
Pydantic models for database documents and data structures.
"""
from modcatalog.models.account import Account
from modcatalog.models.mod import Comment, Mod

__all__ = [
    "Account",
    "Comment",
    "Mod",
]
