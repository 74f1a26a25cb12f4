"""
Persistence stores, one per collection.
"""
from modcatalog.stores.account_store import AccountStore
from modcatalog.stores.mod_store import ModStore

__all__ = [
    "AccountStore",
    "ModStore",
]
