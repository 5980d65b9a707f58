"""
Logging setup for the content utilities.

Library modules only ever ask for named loggers below the "contentutils"
package logger, which carries a NullHandler so importing the package never
prints anything or touches the root logger. Command line scripts opt in to
console and rotating file output by calling setup_logging() or
setup_logging_from_config() once at startup.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


PACKAGE_LOGGER = "contentutils"

LOG_FILENAME = "contentutils.log"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_logging_configured = False


def setup_logging(
    log_level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """
    Attach console and optional file handlers to the package logger.

    Only the first call has an effect. The root logger is left alone so
    applications embedding the library keep control of their own output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        logs_directory: Directory for log files. If None, file logging disabled.
        max_file_size_mb: Maximum size of each log file in MB.
        backup_count: Number of backup files to keep.

    Returns:
        The "contentutils" package logger.
    """
    global _logging_configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _logging_configured:
        return package_logger

    package_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / LOG_FILENAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _logging_configured = True
    return package_logger


def setup_logging_from_config(config) -> logging.Logger:
    """Configure package logging from the logging and paths sections of a Config."""
    return setup_logging(
        log_level=config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Never configures handlers; output appears once a script has called
    setup_logging().

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
