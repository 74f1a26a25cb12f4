"""
Mod request/response schemas.
"""
from pydantic import BaseModel, Field

from modcatalog.models.mod import Mod


class ModListResponse(BaseModel):
    """All mods."""
    data: list[Mod]


class ModSearchResponse(BaseModel):
    """Mods matching a filter, with the match count."""
    data: list[Mod]
    num: int = Field(..., description="Number of matching mods")


class TagUpdateRequest(BaseModel):
    """Tags to add and delete; deletes are applied first."""
    add: list[str] = Field(default_factory=list, description="Tags to add")
    delete: list[str] = Field(default_factory=list, description="Tags to delete")


class CommentCreate(BaseModel):
    """Comment request body."""
    username: str = Field(..., description="Commenter username")
    content: str = Field(..., description="Comment text")


class TagListResponse(BaseModel):
    """Every tag used by any mod."""
    tag: list[str]


class GameListResponse(BaseModel):
    """Games mods can be uploaded for."""
    games: list[str] = Field(..., alias="Games")

    class Config:
        populate_by_name = True
