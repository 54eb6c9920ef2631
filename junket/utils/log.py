"""
Logging setup for applications embedding the junket core.
"""

import logging
from typing import Optional

from junket.config import get_settings, parse_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the host process.

    Args:
        level: Level name; defaults to settings.log_level

    Raises:
        ValueError: If the level name is not one logging knows
    """
    level_name = parse_log_level(level or get_settings().log_level)
    logging.basicConfig(
        level=level_name,
        format=LOG_FORMAT,
    )
    logging.getLogger("junket").setLevel(level_name)
