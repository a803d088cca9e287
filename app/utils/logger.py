"""Logging configuration for the seed catalog backend."""

import sys
from loguru import logger
from app.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger():
    """Configure the catalog logger (stdout always, rotating file unless testing)."""
    logger.remove()

    logger.add(
        sys.stdout,
        level=settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    # Tests run with APP_ENV=test and should not leave log files behind
    if settings.log_file and settings.app_env != "test":
        logger.add(
            settings.log_file,
            level=settings.log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    return logger


logger = setup_logger()
