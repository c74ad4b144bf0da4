"""
Logging setup for applications embedding the resume client.
"""

import logging
import sys
from resume_client.config import get_settings

def setup_logging(level: str = None) -> logging.Logger:
    """Configure root logging for a host application (UI, scripts)."""
    settings = get_settings()
    log_level = (level or settings.LOG_LEVEL).upper()

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )

    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger("resume_client")
