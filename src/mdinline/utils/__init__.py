"""Utility modules for mdinline.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for namespaced logging
"""

from mdinline.utils.hashing import hash_str
from mdinline.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
