"""Logging setup for scripts and the command line tool."""

import logging
from typing import Optional

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """
    Configure root logging once for a process.

    Library modules only create loggers; the entry point decides where the
    records go.

    Args:
        level: Level name such as "DEBUG". Defaults to SEQ_POW_LOG_LEVEL.

    Returns:
        int: The numeric level that was applied
    """
    name = (level or EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL)).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric
