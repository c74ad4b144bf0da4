"""
Module-level loggers for the resume client.

Every module grabs its logger through ``get_logger(__name__)`` so that all
client output shares one format and honours ``LOG_LEVEL`` / ``LOG_FILE``.
"""

import logging
import sys
from typing import Optional

from resume_client.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a logger with the client's handlers attached once."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        settings = get_settings()
        formatter = logging.Formatter(LOG_FORMAT)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if settings.LOG_FILE:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        log_level = (level or settings.LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    return logger
