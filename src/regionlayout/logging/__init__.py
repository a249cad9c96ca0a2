"""Logging module for regionlayout."""

from .logger import LogContext, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "LogContext",
]
