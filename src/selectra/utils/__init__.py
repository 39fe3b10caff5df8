"""Utility modules for Selectra.

Provides:
- logger: get_logger for logging
"""

from selectra.utils.logger import get_logger

__all__ = [
    "get_logger",
]
