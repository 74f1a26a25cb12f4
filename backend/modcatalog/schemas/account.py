"""
Account request/response schemas.
"""
from pydantic import BaseModel, Field

from modcatalog.models.account import Account


class AccountCreate(BaseModel):
    """Signup request body."""
    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="Password")

    def to_account(self) -> Account:
        return Account(username=self.username, password=self.password)


class AccountResponse(BaseModel):
    """Account information response (excludes the password)."""
    username: str = Field(..., description="Username")
    favorite_mod_names: list[str] = Field(..., alias="favoriteModNames")

    class Config:
        populate_by_name = True

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            username=account.username,
            favorite_mod_names=account.favorite_mod_names,
        )


class AccountListResponse(BaseModel):
    """List of accounts."""
    data: list[AccountResponse]
    num: int = Field(..., description="Number of accounts returned")


class PasswordUpdateRequest(BaseModel):
    """Password change request body."""
    old_password: str = Field(..., alias="oldPassword", description="Current password")
    new_password: str = Field(..., alias="newPassword", min_length=1, description="New password")

    class Config:
        populate_by_name = True


class FavoriteRequest(BaseModel):
    """Favorite a mod."""
    mod_name: str = Field(..., alias="modName", description="Name of the mod to favorite")

    class Config:
        populate_by_name = True
