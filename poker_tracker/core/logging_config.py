"""Logging configuration for the poker tracker."""

from pathlib import Path
import sys

from loguru import logger

from poker_tracker.core.config import LOG_DIR, LOG_LEVEL


def configure_logging() -> None:
    """Configure loguru logger with file output and rotation."""
    logs_dir = Path(LOG_DIR)
    logs_dir.mkdir(exist_ok=True)

    # Remove default handler (console only)
    logger.remove()

    logger.add(
        sink=sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=LOG_LEVEL,
        colorize=True,
    )

    logger.add(
        sink=logs_dir / "poker_tracker_{time:YYYY-MM-DD}.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="00:00",  # Rotate at midnight
        retention="30 days",
        compression="zip",
        enqueue=True,  # Thread-safe logging
    )

    # Errors are kept longer
    logger.add(
        sink=logs_dir / "poker_tracker_errors_{time:YYYY-MM-DD}.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR",
        rotation="00:00",
        retention="90 days",
        compression="zip",
        enqueue=True,
    )

    logger.info(f"Logging configured: console ({LOG_LEVEL}) + file output in {logs_dir}")
