"""
Mod store: CRUD and search over the mods collection.

Mod names are unique regardless of case. As with accounts, the uniqueness
checks run before the write in the same call but are not atomic with it; two
concurrent inserts of the same new name can both succeed.
"""
from typing import Any, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from modcatalog.core.logging import get_logger
from modcatalog.database.databases.catalog_db import Collections
from modcatalog.database.filters import (
    InvalidFilterError,
    build_query,
    describe,
    exact_name_pattern,
)
from modcatalog.models.mod import Comment, Mod

logger = get_logger("mods")

DUMMY_COMMENTS = [
    Comment(username="Dummy User1", content="Dummy Comment1"),
    Comment(username="Dummy User2", content="Dummy Comment2"),
    Comment(username="Dummy User3", content="Dummy Comment3"),
]


def _dummy_mod(mod_name: str, tags: list[str]) -> Mod:
    return Mod(
        mod_name=mod_name,
        author="Dummy Author",
        desc="Dummy Description",
        date_created="Dummy Date Created",
        date_modified="Dummy Date Modified",
        url="Dummy URL",
        game_name="Dummy Game Name",
        tags=tags,
        icon="Dummy Icon",
        comments=list(DUMMY_COMMENTS),
        slug="Default Slug",
    )


class ModStore:
    """Store for mod records."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the catalog database."""
        self.db = db
        self.collection = db[Collections.MODS]

    async def insert(self, mod: Mod) -> bool:
        """
        Insert a new mod.

        Returns:
            False if a mod with the same name, ignoring case, already exists
        """
        try:
            existing = await self.collection.find_one(
                {"modName": exact_name_pattern(mod.mod_name)}
            )
            if existing is not None:
                logger.warning(f"Mod [{existing['modName']}] already exists")
                return False
            result = await self.collection.insert_one(mod.to_document())
        except PyMongoError:
            logger.exception(f"Failed to insert mod [{mod.mod_name}]")
            return False

        logger.info(f"Mod [{mod.mod_name}] created with ID: {result.inserted_id}")
        return True

    async def find(self, mod_name: str) -> Optional[Mod]:
        """Get the mod with exactly this name, or None."""
        try:
            doc = await self.collection.find_one({"modName": mod_name})
        except PyMongoError:
            logger.exception(f"Failed to look up mod [{mod_name}]")
            return None

        if doc is None:
            logger.warning(f"Mod [{mod_name}] not found")
            return None
        logger.info(f"Mod [{mod_name}] found")
        return Mod.model_validate(doc)

    async def search(self, filter: Optional[Mapping[str, Any]] = None) -> list[Mod]:
        """
        Get all mods matching a filter.

        Args:
            filter: Field to exact value or pattern, e.g.
                ``{"modName": "Foo", "author": re.compile("^Bar")}``

        Returns:
            Matching mods, empty if none match
        """
        try:
            query = build_query(filter)
            docs = await self.collection.find(query).to_list(length=None)
        except InvalidFilterError as e:
            logger.warning(f"Rejected mod filter {filter!r}: {e}")
            return []
        except PyMongoError:
            logger.exception(f"Mod search failed for filter {filter!r}")
            return []

        if not docs:
            logger.warning(f"No mods found with filter: {describe(query)}")
        else:
            logger.info(f"{len(docs)} mod(s) found with filter: {describe(query)}")
        return [Mod.model_validate(doc) for doc in docs]

    async def get_all(self) -> list[Mod]:
        """Get every mod."""
        return await self.search({})

    async def search_by_tags(self, tags: list[str]) -> list[Mod]:
        """Get the mods carrying every one of ``tags``."""
        if not tags:
            return await self.get_all()
        try:
            docs = await self.collection.find({"tags": {"$all": tags}}).to_list(length=None)
        except PyMongoError:
            logger.exception(f"Tag search failed for tags {tags}")
            return []

        logger.info(f"{len(docs)} mod(s) found with tags: {tags}")
        return [Mod.model_validate(doc) for doc in docs]

    async def get_all_tags(self) -> list[str]:
        """Distinct tags across all mods, in first-seen order."""
        seen: dict[str, None] = {}
        for mod in await self.get_all():
            for tag in mod.tags:
                seen.setdefault(tag, None)
        return list(seen)

    async def remove(self, mod_name: str) -> bool:
        """
        Delete a mod.

        Returns:
            False if no mod has exactly this name
        """
        try:
            existing = await self.collection.find_one({"modName": mod_name})
            if existing is None:
                logger.warning(f"Mod [{mod_name}] does not exist")
                return False
            await self.collection.delete_one({"modName": mod_name})
        except PyMongoError:
            logger.exception(f"Failed to delete mod [{mod_name}]")
            return False

        logger.info(f"Mod [{mod_name}] deleted")
        return True

    async def remove_all(self) -> bool:
        """
        Delete every mod.

        Returns:
            False if the collection was already empty
        """
        try:
            count = await self.collection.count_documents({})
            if count == 0:
                logger.warning("Mods collection is empty, nothing deleted")
                return False
            result = await self.collection.delete_many({})
        except PyMongoError:
            logger.exception("Failed to delete all mods")
            return False

        logger.info(f"All {result.deleted_count} mod(s) deleted")
        return True

    async def update(self, mod_name: str, mod: Mod) -> bool:
        """
        Overwrite the mod named ``mod_name`` with every field of ``mod``.

        Succeeds when the mod exists and no other mod holds the new name
        (ignoring case), or when the name is unchanged.

        Returns:
            False if the mod does not exist or the new name is taken
        """
        try:
            if mod.mod_name != mod_name:
                existing = await self.collection.find_one({"modName": mod_name})
                holders = await self.collection.find(
                    {"modName": exact_name_pattern(mod.mod_name)}
                ).to_list(length=None)
                taken = any(doc["modName"] != mod_name for doc in holders)
                if existing is None or taken:
                    logger.warning(
                        f"Mod [{mod_name}] does not exist or new mod name "
                        f"[{mod.mod_name}] already exists"
                    )
                    return False
            await self.collection.update_one(
                {"modName": mod_name},
                {"$set": mod.to_document()},
            )
        except PyMongoError:
            logger.exception(f"Failed to update mod [{mod_name}]")
            return False

        logger.info(f"Mod [{mod_name}] updated")
        return True

    async def insert_dummy_mods(self, num_mods: int) -> Optional[bool]:
        """
        Insert ``num_mods`` fixture mods plus "Mod1".

        Mods whose name is already taken are skipped; the rest are still
        inserted.

        Returns:
            None if ``num_mods`` is not positive, False if any name was taken
        """
        if num_mods <= 0:
            return None

        mods = [
            _dummy_mod(f"Dummy Mod {i}", ["Dummy Tag1", "Dummy Tag2", "Dummy Tag3"])
            for i in range(num_mods)
        ]
        mods.append(_dummy_mod("Mod1", ["Good Tag1", "Dummy Tag2", "Goofy Tag3"]))

        all_unique = True
        for mod in mods:
            if not await self.insert(mod):
                all_unique = False
        return all_unique

    async def insert_default(self) -> bool:
        """Insert the "Default Mod" fixture."""
        default_mod = Mod(
            mod_name="Default Mod",
            author="Default Author",
            desc="Default Description",
            date_created="2022/11/01",
            date_modified="2022/11/01",
            url="https://www.google.com",
            game_name="Default Game",
            tags=["Default Tag"],
            icon="Default Icon",
            comments=list(DUMMY_COMMENTS),
            slug="Default Slug",
        )
        return await self.insert(default_mod)
