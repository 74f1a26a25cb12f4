"""
Account model for the accounts collection.
"""
from pydantic import BaseModel, Field


class Account(BaseModel):
    """
    Account document model for MongoDB accounts collection.
    
    Passwords are stored and compared as given; there is no hashing.
    """
    username: str = Field(..., description="Unique username")
    password: str = Field(..., description="Plaintext password")
    favorite_mod_names: list[str] = Field(
        default_factory=list,
        alias="favoriteModNames",
        description="Favorited mod names in insertion order, no duplicates",
    )

    class Config:
        populate_by_name = True

    def add_favorite_mod(self, mod_name: str) -> bool:
        """
        Append a mod to the favorites list.
        
        Args:
            mod_name: Name of the mod to favorite
            
        Returns:
            False if the mod is already a favorite (list left unchanged)
        """
        if mod_name in self.favorite_mod_names:
            return False
        self.favorite_mod_names.append(mod_name)
        return True

    def to_document(self) -> dict:
        """Serialize with the persisted (camelCase) field names."""
        return self.model_dump(by_alias=True)
