# utils/__init__.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Utility module exports

from .build_log_reader import (
    read_build_log,
    validate_build_log,
    projects_in_log,
)
from .logger import LogLevel, get_logger, configure_logging, set_log_level

__all__ = [
    "read_build_log",
    "validate_build_log",
    "projects_in_log",
    "LogLevel",
    "get_logger",
    "configure_logging",
    "set_log_level",
]
