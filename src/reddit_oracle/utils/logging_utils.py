import logging
from typing import Optional, Union

from reddit_oracle.config import LOG_CONFIG


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for scripts and host applications.

    The engine modules only create loggers; nothing is configured on import.
    """
    if level is None:
        level = LOG_CONFIG.level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_CONFIG.fmt)
