"""
Logging configuration for httphelper

Provides logging with stderr console output and optional file output.
Console output goes to stderr so response bodies written to stdout stay clean.
"""

import logging
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class HttpHelperLogger:
    """Centralized logger for the package"""

    def __init__(
        self,
        name: str = "httphelper",
        log_file: Path | None = None,
        console_output: bool = True,
        console_level: int = logging.WARNING,
        fmt: str = DEFAULT_FORMAT,
        datefmt: str = DEFAULT_DATEFMT,
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "httphelper" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to log to stderr
            console_level: Level for the console handler
            fmt: Log record format
            datefmt: Timestamp format
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(fmt, datefmt=datefmt)

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(console_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(
    log_file: Path | None = None, verbose: bool = False, config_obj=None
) -> logging.Logger:
    """
    Setup logging for a CLI run

    Args:
        log_file: Optional file receiving DEBUG output
        verbose: Log DEBUG to the console instead of the configured level
        config_obj: Config object (optional, uses global config if None)

    Returns:
        Configured logger instance
    """
    if config_obj is None:
        from .config import config as config_obj

    if verbose:
        console_level = logging.DEBUG
    else:
        level_name = str(config_obj.get("logging.level", "WARNING")).upper()
        console_level = logging.getLevelName(level_name)
        if not isinstance(console_level, int):
            console_level = logging.WARNING

    logger_wrapper = HttpHelperLogger(
        name="httphelper",
        log_file=log_file,
        console_output=True,
        console_level=console_level,
        fmt=config_obj.get("logging.format", DEFAULT_FORMAT),
        datefmt=config_obj.get("logging.datefmt", DEFAULT_DATEFMT),
    )
    return logger_wrapper.get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'executor', 'url_parser')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"httphelper.{module_name}")
