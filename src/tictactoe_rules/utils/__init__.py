"""Utility modules for the terminal front end."""

from .rich_display import BoardDisplay, describe_error, setup_rich_logging

__all__ = [
    "BoardDisplay",
    "describe_error",
    "setup_rich_logging",
]
