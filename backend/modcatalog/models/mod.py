"""
Mod model for the mods collection.
"""
from pydantic import BaseModel, Field, field_validator


class Comment(BaseModel):
    """A single comment left on a mod."""
    username: str = Field(..., description="Commenter username")
    content: str = Field(..., description="Comment text")


class Mod(BaseModel):
    """
    Mod document model for MongoDB mods collection.
    
    ``author`` holds an account username by value; it is never checked
    against the accounts collection.
    """
    mod_name: str = Field(
        ...,
        alias="modName",
        description="Mod name, unique regardless of case",
    )
    author: str = Field(default="", description="Author username")
    desc: str = Field(default="", description="Description")
    date_created: str = Field(default="", alias="dateCreated")
    date_modified: str = Field(default="", alias="dateModified")
    url: str = Field(default="", description="Download link")
    game_name: str = Field(default="", alias="gameName")
    tags: list[str] = Field(default_factory=list, description="Tags, no duplicates")
    views: int = Field(default=0, description="View counter")
    icon: str = Field(default="", description="Path or URL of the icon image")
    likes: int = Field(default=0, description="Like counter (may go negative)")
    comments: list[Comment] = Field(default_factory=list)
    slug: str = Field(default="", description="Short description with keywords")

    @field_validator("tags")
    @classmethod
    def drop_duplicate_tags(cls, tags: list[str]) -> list[str]:
        """Keep the first occurrence of each tag."""
        return list(dict.fromkeys(tags))

    class Config:
        populate_by_name = True

    def increment_views(self) -> bool:
        self.views += 1
        return True

    def increment_likes(self) -> bool:
        self.likes += 1
        return True

    def decrement_likes(self) -> bool:
        # No floor: likes can drop below zero.
        self.likes -= 1
        return True

    def add_comment(self, username: str, content: str) -> None:
        self.comments.append(Comment(username=username, content=content))

    def clear_comments(self) -> None:
        self.comments = []

    def to_document(self) -> dict:
        """Serialize with the persisted (camelCase) field names."""
        return self.model_dump(by_alias=True)
