"""
Logging configuration.

Every store logs through a named child of the ``modcatalog`` logger so the
level can be tuned from ``Settings.log_level``.
"""
import logging

from modcatalog.config import get_settings

ROOT_LOGGER = "modcatalog"


def setup_logging(level: str | None = None) -> None:
    """Configure the root handler once at application startup."""
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(ROOT_LOGGER).setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
