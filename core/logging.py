# core/logging.py
import sys
from typing import Optional

from loguru import logger

from core.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Send loguru output to stderr at the configured level."""
    level = (level or get_settings().LOG_LEVEL).upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
    logger.debug(f"Logging configured at {level}")
