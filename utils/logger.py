# utils/logger.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Logging utility for build-order verification with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for build-order verification."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class OrdoLogger:
    """Centralized logger for build-order verification with structured output."""

    def __init__(self, name: str = "ordo", level: LogLevel = LogLevel.WARNING):
        """Initialize the Ordo logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(OrdoFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for verification events
    def verification_start(self, project_count: int, log_length: int, policy: str):
        """Log the start of a verification pass."""
        self.info("=== Verifying build order ===")
        self.info(f"Projects: {project_count}, log entries: {log_length}")
        self.info(f"Policy: {policy}")

    def pair_classified(self, subject: str, other: str, relation: str):
        """Log the relation computed for a project pair."""
        self.debug(f"    {subject} vs {other}: {relation}")

    def violation_found(self, message: str):
        """Log a detected order violation."""
        self.info(f"  ❌ {message}")

    def final_result(self, passed: bool, violation_count: int):
        """Log the outcome of a verification pass."""
        if passed:
            self.info(">>> BUILD ORDER OK <<<")
        else:
            self.info(f">>> BUILD ORDER VIOLATED ({violation_count} violations) <<<")


class OrdoFormatter(logging.Formatter):
    """Custom formatter with clean output for INFO and above."""

    def format(self, record):
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"
        if record.levelno >= logging.WARNING:
            return f"[{record.levelname}] {record.getMessage()}"
        return record.getMessage()


# Global logger instance
_global_logger: Optional[OrdoLogger] = None


def get_logger(name: str = "ordo") -> OrdoLogger:
    """Get or create the global Ordo logger instance.

    Args:
        name: Logger name (default: "ordo")

    Returns:
        OrdoLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = OrdoLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on caller flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
