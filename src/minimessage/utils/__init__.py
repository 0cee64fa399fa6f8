"""Utility modules for MiniMessage.

Provides:
- logger: get_logger for namespaced logging
"""

from minimessage.utils.logger import get_logger

__all__ = [
    "get_logger",
]
