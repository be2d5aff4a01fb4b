"""Logging configuration for the application."""

import logging
import sys

from linkbio.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Logfire handles application events; this sets levels for the standard
    library loggers used by uvicorn, SQLAlchemy and our own modules.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("multipart").setLevel(logging.WARNING)

    logging.getLogger("linkbio").setLevel(level)

    logger = get_logger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
