"""
ModCatalog - catalog service for user-submitted game mods and accounts.
"""
__version__ = "0.1.0"
