# dataverse_client/log_config.py
"""Logging configuration for the dataverse_client library using Loguru.

This module provides a centralized function to configure the Loguru logger
with a standardized format, level, and sink. Other modules import `logger`
from here so that they all share the same configuration.
"""

import sys

from loguru import logger

__all__ = ["configure_logging", "logger"]


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures Loguru logger.

    Removes existing handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,  # locals may hold the API token
    )
    logger.info(f"Loguru logger configured with level={level.upper()} writing to {sink}")
