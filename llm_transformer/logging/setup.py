"""Logging configuration for the transformer."""

import logging
import os
import sys

LOGGER_NAME = "llm-transformer"
LOG_LEVEL_ENV = "LLM_TRANSFORMER_LOG_LEVEL"


def setup_logging() -> logging.Logger:
    """Set up logging with proper handlers and formatters."""
    logger = logging.getLogger(LOGGER_NAME)
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Propagate so host applications (and pytest's caplog) see the records
    logger.propagate = True

    return logger


# Global logger instance
logger = setup_logging()
