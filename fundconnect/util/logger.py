"""
Centralized logging configuration
"""

# Python Packages
import logging

# Constants
from ..base import constants


def setup_logging(level: str = None):
    """Configure application-wide logging."""
    level = (level or constants.LOG_LEVEL).upper()
    logging.basicConfig(
        level = getattr(logging, level, logging.INFO),
        format = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the fundconnect namespace."""
    return logging.getLogger(f"fundconnect.{name}")
