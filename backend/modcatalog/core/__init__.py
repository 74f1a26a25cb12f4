"""
Core utilities - logging setup.
"""
from modcatalog.core.logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
