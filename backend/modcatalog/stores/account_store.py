"""
Account store: CRUD and search over the accounts collection.

Every operation is a self-contained unit of work. Expected outcomes (missing
account, duplicate username, wrong password) come back as ``False``/``None``;
storage faults are logged and reported the same way instead of raising.
"""
from typing import Any, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from modcatalog.core.logging import get_logger
from modcatalog.database.databases.catalog_db import Collections
from modcatalog.database.filters import InvalidFilterError, build_query, describe
from modcatalog.models.account import Account

logger = get_logger("accounts")

DUMMY_ACCOUNTS = [
    Account(username="admin", password="admin"),
    Account(username="user", password="user"),
    Account(username="author", password="author"),
]


class AccountStore:
    """Store for account records."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the catalog database."""
        self.db = db
        self.collection = db[Collections.ACCOUNTS]

    async def insert(self, account: Account) -> bool:
        """
        Insert a new account.

        Returns:
            False if an account with the same username already exists
        """
        try:
            existing = await self.collection.find_one({"username": account.username})
            if existing is not None:
                logger.warning(f"Account [{account.username}] already exists")
                return False
            result = await self.collection.insert_one(account.to_document())
        except PyMongoError:
            logger.exception(f"Failed to insert account [{account.username}]")
            return False

        logger.info(f"Account [{account.username}] created with ID: {result.inserted_id}")
        return True

    async def find(self, username: str) -> Optional[Account]:
        """Get the account with the given username, or None."""
        try:
            doc = await self.collection.find_one({"username": username})
        except PyMongoError:
            logger.exception(f"Failed to look up account [{username}]")
            return None

        if doc is None:
            logger.warning(f"Account [{username}] not found")
            return None
        logger.info(f"Account [{username}] found")
        return Account.model_validate(doc)

    async def search(self, filter: Optional[Mapping[str, Any]] = None) -> list[Account]:
        """
        Get all accounts matching a filter.

        Args:
            filter: Field to exact value or pattern, e.g.
                ``{"username": "Foo", "password": re.compile("^Bar")}``

        Returns:
            Matching accounts, empty if none match
        """
        try:
            query = build_query(filter)
            docs = await self.collection.find(query).to_list(length=None)
        except InvalidFilterError as e:
            logger.warning(f"Rejected account filter {filter!r}: {e}")
            return []
        except PyMongoError:
            logger.exception(f"Account search failed for filter {filter!r}")
            return []

        if not docs:
            logger.warning(f"No accounts found with filter: {describe(query)}")
        else:
            logger.info(f"{len(docs)} account(s) found with filter: {describe(query)}")
        return [Account.model_validate(doc) for doc in docs]

    async def get_all(self) -> list[Account]:
        """Get every account."""
        return await self.search({})

    async def remove(self, username: str) -> bool:
        """
        Delete an account.

        Returns:
            False if no account has the given username
        """
        try:
            existing = await self.collection.find_one({"username": username})
            if existing is None:
                logger.warning(f"Account [{username}] does not exist, cannot delete")
                return False
            await self.collection.delete_one({"username": username})
        except PyMongoError:
            logger.exception(f"Failed to delete account [{username}]")
            return False

        logger.info(f"Account [{username}] deleted")
        return True

    async def remove_all(self) -> bool:
        """
        Delete every account.

        Returns:
            False if the collection was already empty
        """
        try:
            count = await self.collection.count_documents({})
            if count == 0:
                logger.warning("Accounts collection is empty, nothing deleted")
                return False
            result = await self.collection.delete_many({})
        except PyMongoError:
            logger.exception("Failed to delete all accounts")
            return False

        logger.info(f"All {result.deleted_count} account(s) deleted")
        return True

    async def update(self, old_username: str, old_password: str, new_password: str) -> bool:
        """
        Change an account password after checking the current one.

        Returns:
            False if the account does not exist or ``old_password`` does not
            match. The two cases are not distinguished.
        """
        try:
            existing = await self.collection.find_one({"username": old_username})
            if existing is None:
                logger.warning(f"Account [{old_username}] does not exist, cannot update")
                return False
            if existing.get("password") != old_password:
                logger.warning(f"Account [{old_username}] password does not match, cannot update")
                return False
            await self.collection.update_one(
                {"username": old_username},
                {"$set": {"password": new_password}},
            )
        except PyMongoError:
            logger.exception(f"Failed to update account [{old_username}]")
            return False

        logger.info(f"Account [{old_username}] password updated")
        return True

    async def add_favorite(self, username: str, mod_name: str) -> bool:
        """
        Add a mod to an account's favorites.

        Returns:
            False if the account does not exist or already favorites the mod
        """
        account = await self.find(username)
        if account is None:
            return False
        if not account.add_favorite_mod(mod_name):
            logger.warning(f"Mod [{mod_name}] is already a favorite of [{username}]")
            return False

        try:
            await self.collection.update_one(
                {"username": username},
                {"$set": {"favoriteModNames": account.favorite_mod_names}},
            )
        except PyMongoError:
            logger.exception(f"Failed to save favorites of account [{username}]")
            return False

        logger.info(f"Mod [{mod_name}] added to favorites of [{username}]")
        return True

    async def insert_dummy_accounts(self) -> bool:
        """
        Insert the admin, user and author fixture accounts.

        Returns:
            False if the collection is not empty (nothing inserted)
        """
        try:
            if await self.collection.find_one() is not None:
                logger.warning("Accounts collection is not empty, dummy accounts not inserted")
                return False
            result = await self.collection.insert_many(
                [account.to_document() for account in DUMMY_ACCOUNTS]
            )
        except PyMongoError:
            logger.exception("Failed to insert dummy accounts")
            return False

        logger.info(f"{len(result.inserted_ids)} dummy account(s) inserted")
        return True
