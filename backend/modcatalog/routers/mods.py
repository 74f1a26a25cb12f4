"""
Mods router for uploading, querying and engaging with mods.

Per-mod routes take the name as a single path segment, so a mod whose name
contains "/" can only be reached through POST /mods/search. Collection-level
routes use a different method or an extra segment, so no name is shadowed.
"""
from typing import Any, Awaitable

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from modcatalog.dependencies.database import get_mod_service, get_mod_store
from modcatalog.models.mod import Mod
from modcatalog.schemas.mod import (
    CommentCreate,
    ModListResponse,
    ModSearchResponse,
    TagUpdateRequest,
)
from modcatalog.services.mod_service import ModService
from modcatalog.stores.mod_store import ModStore

router = APIRouter(prefix="/mods", tags=["Mods"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Mod does not exist",
    )


# ==================== Mod CRUD ====================


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Upload a mod",
)
async def upload_mod(
    body: Mod,
    mod_store: ModStore = Depends(get_mod_store),
):
    """
    Upload a new mod.
    
    The name must not match an existing mod, ignoring case.
    """
    if not await mod_store.insert(body):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Mod already exists",
        )
    return {"modName": body.mod_name}


@router.get(
    "",
    response_model=ModListResponse,
    summary="List all mods",
)
async def list_mods(mod_store: ModStore = Depends(get_mod_store)):
    """Get every mod in the catalog."""
    return ModListResponse(data=await mod_store.get_all())


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete all mods",
)
async def delete_all_mods(mod_store: ModStore = Depends(get_mod_store)):
    """Delete every mod. 404 if the catalog is already empty."""
    if not await mod_store.remove_all():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No mods to delete",
        )


@router.post(
    "/search",
    response_model=ModSearchResponse,
    summary="Search mods with a filter",
)
async def search_mods(
    filter: dict[str, Any] = Body(default={}),
    mod_store: ModStore = Depends(get_mod_store),
):
    """
    Find mods matching every field of a filter.
    
    Values are exact matches, or patterns in the form
    `{"$regex": "^Foo", "$options": "i"}`.
    """
    mods = await mod_store.search(filter)
    if not mods:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Can't find any mod with this filter",
        )
    return ModSearchResponse(data=mods, num=len(mods))


@router.get(
    "/tags/search",
    response_model=ModSearchResponse,
    summary="Search mods by tags",
)
async def search_mods_by_tags(
    tag: list[str] = Query(default=[], description="Tags every mod must carry"),
    mod_store: ModStore = Depends(get_mod_store),
):
    """Find mods carrying all of the given tags."""
    mods = await mod_store.search_by_tags(tag)
    if not mods:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Can't find any mod with these tag filters",
        )
    return ModSearchResponse(data=mods, num=len(mods))


@router.get(
    "/{mod_name}",
    response_model=Mod,
    summary="Get a mod",
)
async def get_mod(
    mod_name: str,
    mod_store: ModStore = Depends(get_mod_store),
):
    """Get a mod by its exact name."""
    mod = await mod_store.find(mod_name)
    if mod is None:
        raise _not_found()
    return mod


@router.put(
    "/{mod_name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a mod",
)
async def update_mod(
    mod_name: str,
    body: Mod,
    mod_store: ModStore = Depends(get_mod_store),
):
    """
    Replace every field of a mod. The body may carry a new name, as long as
    no other mod already uses it.
    """
    if not await mod_store.update(mod_name, body):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Mod name does not exist or new mod name conflicts",
        )


@router.delete(
    "/{mod_name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a mod",
)
async def delete_mod(
    mod_name: str,
    mod_store: ModStore = Depends(get_mod_store),
):
    """Delete a mod by its exact name."""
    if not await mod_store.remove(mod_name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Failed to delete mod",
        )


# ==================== Engagement ====================


async def _apply(operation: Awaitable[bool]) -> None:
    try:
        succeeded = await operation
    except ValueError:
        raise _not_found()
    if not succeeded:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Failed to update mod",
        )


@router.patch(
    "/{mod_name}/tags",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Add and delete tags",
)
async def update_tags(
    mod_name: str,
    body: TagUpdateRequest,
    mod_service: ModService = Depends(get_mod_service),
):
    """
    Update a mod's tags.
    
    - **delete**: Tags to remove (applied first)
    - **add**: Tags to append if not already present
    """
    await _apply(mod_service.update_tags(mod_name, body.add, body.delete))


@router.post(
    "/{mod_name}/views",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Count a view",
)
async def add_view(
    mod_name: str,
    mod_service: ModService = Depends(get_mod_service),
):
    """Increment a mod's view counter."""
    await _apply(mod_service.add_view(mod_name))


@router.post(
    "/{mod_name}/likes",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Like or unlike",
)
async def change_likes(
    mod_name: str,
    change: int = Query(1, description="1 to like, -1 to unlike"),
    mod_service: ModService = Depends(get_mod_service),
):
    """Add one like (`change=1`) or remove one (any other value)."""
    await _apply(mod_service.change_likes(mod_name, change))


@router.post(
    "/{mod_name}/comments",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Comment on a mod",
)
async def add_comment(
    mod_name: str,
    body: CommentCreate,
    mod_service: ModService = Depends(get_mod_service),
):
    """Append a comment to a mod."""
    await _apply(mod_service.add_comment(mod_name, body.username, body.content))


@router.delete(
    "/{mod_name}/comments",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear comments",
)
async def clear_comments(
    mod_name: str,
    mod_service: ModService = Depends(get_mod_service),
):
    """Remove every comment from a mod."""
    await _apply(mod_service.clear_comments(mod_name))
