import logging
from typing import Optional

from .config import settings

LOGGER_NAME = 'gamestore'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s'

_configured = False


def setup_logging(level: Optional[str] = None):
    """Configure the root handler once; later calls only adjust the level"""
    global _configured
    level = (level or settings.LOG_LEVEL).upper()
    if not _configured:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _configured = True
    logging.getLogger(LOGGER_NAME).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger in the service namespace, configuring logging on first use"""
    if not _configured:
        setup_logging()
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
