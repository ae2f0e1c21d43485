"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from src.core.config import settings


def setup_logging() -> None:
    """Configure Loguru logging for the application."""
    # Remove default handler
    logger.remove()

    # Console format
    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level> | "
        "{extra}"
    )

    # File format (more detailed)
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
    )

    if settings.log_to_file:
        logs_dir = settings.logs_dir
        logger.add(
            logs_dir / "scrapeflow_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="DEBUG",
            rotation="00:00",  # Rotate at midnight
            retention="30 days",
            compression="gz",
            backtrace=True,
            diagnose=True,
        )

        # Structured copy for log aggregation
        logger.add(
            logs_dir / "scrapeflow_{time:YYYY-MM-DD}.json",
            format="{message}",
            level="INFO",
            rotation="00:00",
            retention="14 days",
            compression="gz",
            serialize=True,
        )

    logger.info(
        f"Logging initialized | app={settings.app_name} | "
        f"level={settings.log_level} | env={settings.app_env.value}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_scraping_event(
    url: str,
    engine: str,
    duration: float,
    success: bool = True,
    status_code: int | None = None,
    **extra: Any,
) -> None:
    """Log a finished engine call.

    Args:
        url: Requested URL
        engine: Engine name
        duration: Call duration in seconds
        success: Whether the engine produced a result
        status_code: Upstream status code, when one was received
        **extra: Additional context
    """
    status = "SUCCESS" if success else "FAILED"
    bound = logger.bind(
        url=url,
        engine=engine,
        duration=duration,
        success=success,
        status_code=status_code,
        **extra,
    )
    log_func = bound.info if success else bound.warning

    log_func(
        f"Scraping | engine={engine} | url={url} | "
        f"status={status} | duration={duration:.2f}s"
    )
