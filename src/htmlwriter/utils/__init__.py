"""Utility modules for htmlwriter.

Provides:
- logger: get_logger for namespaced logging
"""

from htmlwriter.utils.logger import get_logger

__all__ = [
    "get_logger",
]
