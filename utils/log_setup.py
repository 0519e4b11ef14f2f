import logging
from typing import Optional

from utils.settings import get_log_level

LOGGER_NAME = "notification_status"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure console logging for command line use.
    Falls back to NOTIFICATION_LOG_LEVEL when no level is given.
    """
    level_name = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
    return logging.getLogger(LOGGER_NAME)
