"""
Accounts router for signup, lookup, password change and favorites.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from modcatalog.dependencies.database import get_account_store
from modcatalog.schemas.account import (
    AccountCreate,
    AccountListResponse,
    AccountResponse,
    FavoriteRequest,
    PasswordUpdateRequest,
)
from modcatalog.stores.account_store import AccountStore

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
)
async def signup(
    body: AccountCreate,
    account_store: AccountStore = Depends(get_account_store),
):
    """
    Create a new account.
    
    - **username**: Must not be taken
    - **password**: Stored as given
    """
    account = body.to_account()
    if not await account_store.insert(account):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists",
        )
    return AccountResponse.from_account(account)


@router.get(
    "",
    response_model=AccountListResponse,
    summary="List accounts",
)
async def list_accounts(account_store: AccountStore = Depends(get_account_store)):
    """Get every account (passwords excluded)."""
    accounts = await account_store.get_all()
    return AccountListResponse(
        data=[AccountResponse.from_account(a) for a in accounts],
        num=len(accounts),
    )


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete all accounts",
)
async def delete_all_accounts(account_store: AccountStore = Depends(get_account_store)):
    """Delete every account. 404 if there are none."""
    if not await account_store.remove_all():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No accounts to delete",
        )


@router.post(
    "/search",
    response_model=AccountListResponse,
    summary="Search accounts with a filter",
)
async def search_accounts(
    filter: dict[str, Any] = Body(default={}),
    account_store: AccountStore = Depends(get_account_store),
):
    """Find accounts matching every field of a filter."""
    accounts = await account_store.search(filter)
    if not accounts:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Can't find any account with this filter",
        )
    return AccountListResponse(
        data=[AccountResponse.from_account(a) for a in accounts],
        num=len(accounts),
    )


@router.get(
    "/{username}",
    response_model=AccountResponse,
    summary="Get an account",
)
async def get_account(
    username: str,
    account_store: AccountStore = Depends(get_account_store),
):
    """Get an account by username."""
    account = await account_store.find(username)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Account does not exist",
        )
    return AccountResponse.from_account(account)


@router.delete(
    "/{username}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an account",
)
async def delete_account(
    username: str,
    account_store: AccountStore = Depends(get_account_store),
):
    """Delete an account by username."""
    if not await account_store.remove(username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Failed to delete account",
        )


@router.put(
    "/{username}/password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
)
async def change_password(
    username: str,
    body: PasswordUpdateRequest,
    account_store: AccountStore = Depends(get_account_store),
):
    """
    Change an account password.
    
    Fails the same way whether the account is missing or the current
    password is wrong.
    """
    if not await account_store.update(username, body.old_password, body.new_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )


@router.post(
    "/{username}/favorites",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Favorite a mod",
)
async def add_favorite(
    username: str,
    body: FavoriteRequest,
    account_store: AccountStore = Depends(get_account_store),
):
    """Add a mod to an account's favorites."""
    if not await account_store.add_favorite(username, body.mod_name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Account does not exist or mod is already a favorite",
        )
