"""Utility modules for tokensift.

Provides:
- logger: get_logger for logging
"""

from tokensift.utils.logger import get_logger

__all__ = [
    "get_logger",
]
