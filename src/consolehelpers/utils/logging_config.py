"""
Centralized logging configuration for consolehelpers.
Ensures all logging goes to files and never to stdout/stderr to avoid breaking the prompts.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from consolehelpers.config import LOG_FILE_NAME, LOG_FORMAT, LOGS_DIR

PACKAGE_LOGGER = 'consolehelpers'


def setup_logging(verbose: bool = False, log_dir: Optional[Union[str, Path]] = None) -> Path:
    """Setup centralized logging for the package.

    Args:
        verbose: Enable debug level logging if True
        log_dir: Directory for the log file (default: ~/.consolehelpers/logs)

    Returns:
        Path of the log file
    """
    logs_dir = Path(log_dir) if log_dir else LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if verbose else logging.INFO

    log_file = logs_dir / LOG_FILE_NAME
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replace earlier handlers so repeated setup does not duplicate records
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.addHandler(file_handler)
    logger.propagate = False  # Don't propagate to avoid leaking onto the terminal

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package logger.

    Records reach the file handler installed by setup_logging, and are
    dropped until it has been called.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
