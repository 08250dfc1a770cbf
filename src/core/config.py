"""Runtime settings. Read once at import time from the environment, there are no config files or CLI flags."""

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def read_log_level(value: Optional[str]) -> str:
    """Level name from the environment, or the default when unset or not a level logging knows."""
    if value is None:
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


LOG_LEVEL = read_log_level(os.environ.get("TICTACTOE_LOG_LEVEL"))
