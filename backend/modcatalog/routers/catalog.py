"""
Catalog-wide lookups: tags in use and supported games.
"""
from fastapi import APIRouter, Depends

from modcatalog.config import get_settings
from modcatalog.dependencies.database import get_mod_store
from modcatalog.schemas.mod import GameListResponse, TagListResponse
from modcatalog.stores.mod_store import ModStore

router = APIRouter(tags=["Catalog"])


@router.get(
    "/tags",
    response_model=TagListResponse,
    summary="List all tags",
)
async def list_tags(mod_store: ModStore = Depends(get_mod_store)):
    """Every distinct tag used by any mod."""
    return TagListResponse(tag=await mod_store.get_all_tags())


@router.get(
    "/games",
    response_model=GameListResponse,
    summary="List supported games",
)
async def list_games():
    """Games mods can be uploaded for."""
    return GameListResponse(games=get_settings().supported_games)
