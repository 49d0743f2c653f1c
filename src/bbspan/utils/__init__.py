"""Utility modules for bbspan.

Provides:
- logger: get_logger for logging
"""

from bbspan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
