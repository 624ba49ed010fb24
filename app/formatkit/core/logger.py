"""
Logging configuration module.

This module provides centralized logging setup for the library and its
command-line front end, configuring console and optional file output.
"""

import logging
from typing import Optional
from formatkit.config.settings import Settings


def setup_logger(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> None:
    """
    Configure and initialize the root logger.

    Sets up console logging and, when enabled, a UTF-8 file handler
    writing to Settings.LOG_FILE. Both use the same formatter with
    timestamp, logger name, level, and message.

    Args:
        level: Log level name (default from Settings.LOG_LEVEL)
        log_to_file: Enable file output (default from Settings.LOG_TO_FILE)

    Returns:
        None

    Raises:
        OSError: If logs directory cannot be created (rare, usually permissions issue)

    Example:
        >>> setup_logger()
        >>> logging.info("Formatter ready")
        2025-11-11 14:30:00 - root - INFO - Formatter ready

    Note:
        - Existing handlers are cleared before setup to avoid duplicates
        - An unknown level name falls back to INFO
    """
    level_name = (level or Settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if log_to_file is None:
        log_to_file = Settings.LOG_TO_FILE

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)

        # Handler for file output (UTF-8 encoding for international characters)
        file_handler = logging.FileHandler(Settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
