"""Logging configuration for tabbed_output."""

from tabbed_output.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
