import logging
import sys

from sports_feed.config import CONFIG


def configure_logger(name: str = "sports_feed"):
    """Configure and return the logger for the application."""
    logger = logging.getLogger(name)
    log_level = getattr(logging, CONFIG.LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(log_level)

    # Only add handler if it doesn't already exist (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        logger.addHandler(handler)

    return logger


def create_logger(module_name: str):
    """Get a child logger under the sports_feed namespace."""
    # Children propagate to the configured root handler
    return logging.getLogger(f"sports_feed.{module_name}")


logger = configure_logger()

__all__ = ["logger", "configure_logger", "create_logger"]
