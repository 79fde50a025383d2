"""Utility modules for minire.

Provides:
- logger: get_logger for logging
"""

from minire.utils.logger import get_logger

__all__ = [
    "get_logger",
]
