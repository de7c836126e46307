"""
Logging setup for applications embedding Microblog Graph
"""
from typing import Optional
import logging

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging from settings

    Args:
        settings: Settings to read; the module-level instance when omitted

    Returns:
        The numeric log level that was applied
    """
    settings = settings or default_settings

    if settings.DEBUG:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {settings.LOG_LEVEL}")

    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} logging at {logging.getLevelName(level)}")
    return level
