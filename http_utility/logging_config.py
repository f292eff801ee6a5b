"""
Logging configuration for http-utility

Every module logs to a child of the "http_utility" logger. The package itself only
installs a NullHandler; applications opt in to console/file output via setup_logging().
"""

import logging
import sys
from pathlib import Path

ROOT_LOGGER_NAME = "http_utility"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class HttpUtilityLogger:
    """Centralized logger for the library"""

    def __init__(
        self,
        name: str = ROOT_LOGGER_NAME,
        log_file: Path | None = None,
        console_output: bool = True,
        console_level: int = logging.INFO,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "http_utility" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
            console_level: Minimum level written to the console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(log_file: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Attach console and/or file handlers to the package logger

    Args:
        log_file: Optional file receiving DEBUG and above
        verbose: Whether to also print INFO and above to stdout

    Returns:
        Configured package logger
    """
    return HttpUtilityLogger(log_file=log_file, console_output=verbose).get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'client', 'transport')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
