"""Logging setup shared by the CLI and the API."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once.

    Args:
        level: Level name such as ``DEBUG``; defaults to the configured level
    """
    if level is None:
        from .config import get_settings
        level = get_settings().log_level

    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("fitness_analytics").setLevel(numeric)
