"""
Catalog database configuration.
Stores mod records and the accounts that author or favorite them.
"""


class Collections:
    """Collection names in the catalog database."""
    ACCOUNTS = "accounts"
    MODS = "mods"
    
    # Lookup indexes. Uniqueness is checked by the stores before each write,
    # so none of these are unique.
    INDEXES = {
        "accounts": [
            {"keys": [("username", 1)]},
        ],
        "mods": [
            {"keys": [("modName", 1)]},
            {"keys": [("tags", 1)]},
            {"keys": [("gameName", 1)]},
        ],
    }
