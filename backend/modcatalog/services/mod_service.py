"""
Mod engagement service.

Each operation loads a mod, changes it through the model methods and writes
the whole record back through ``ModStore.update`` under its current name.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from modcatalog.models.mod import Mod
from modcatalog.services.tag_service import reconcile_tags
from modcatalog.stores.mod_store import ModStore


class ModService:
    """Service for views, likes, comments and tags on existing mods."""
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the catalog database."""
        self.db = db
        self.store = ModStore(db)
    
    async def _get_mod(self, mod_name: str) -> Mod:
        mod = await self.store.find(mod_name)
        if mod is None:
            raise ValueError("Mod not found")
        return mod
    
    async def update_tags(
        self,
        mod_name: str,
        add: list[str],
        delete: list[str],
    ) -> bool:
        """
        Apply tag additions and deletions to a mod.
        
        Args:
            mod_name: Name of the mod (renaming is not possible here)
            add: Tags to add
            delete: Tags to delete, applied before ``add``
            
        Returns:
            Result of the store update
            
        Raises:
            ValueError: If the mod does not exist
        """
        mod = await self._get_mod(mod_name)
        mod.tags = reconcile_tags(mod.tags, add=add, delete=delete)
        return await self.store.update(mod_name, mod)
    
    async def add_view(self, mod_name: str) -> bool:
        """Count one view. Raises ValueError if the mod does not exist."""
        mod = await self._get_mod(mod_name)
        mod.increment_views()
        return await self.store.update(mod_name, mod)
    
    async def change_likes(self, mod_name: str, change: int) -> bool:
        """
        Like (``change == 1``) or unlike (anything else) a mod.
        
        Raises:
            ValueError: If the mod does not exist
        """
        mod = await self._get_mod(mod_name)
        if change == 1:
            mod.increment_likes()
        else:
            mod.decrement_likes()
        return await self.store.update(mod_name, mod)
    
    async def add_comment(self, mod_name: str, username: str, content: str) -> bool:
        """Append a comment. Raises ValueError if the mod does not exist."""
        mod = await self._get_mod(mod_name)
        mod.add_comment(username, content)
        return await self.store.update(mod_name, mod)
    
    async def clear_comments(self, mod_name: str) -> bool:
        """Remove every comment. Raises ValueError if the mod does not exist."""
        mod = await self._get_mod(mod_name)
        mod.clear_comments()
        return await self.store.update(mod_name, mod)
