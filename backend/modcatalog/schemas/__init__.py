"""
Pydantic schemas for API request/response validation.
"""
from modcatalog.schemas.account import (
    AccountCreate,
    AccountListResponse,
    AccountResponse,
    FavoriteRequest,
    PasswordUpdateRequest,
)
from modcatalog.schemas.mod import (
    CommentCreate,
    GameListResponse,
    ModListResponse,
    ModSearchResponse,
    TagListResponse,
    TagUpdateRequest,
)

__all__ = [
    # Account
    "AccountCreate",
    "AccountListResponse",
    "AccountResponse",
    "FavoriteRequest",
    "PasswordUpdateRequest",
    # Mod
    "CommentCreate",
    "GameListResponse",
    "ModListResponse",
    "ModSearchResponse",
    "TagListResponse",
    "TagUpdateRequest",
]
