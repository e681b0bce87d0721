"""Hashing utilities for cache keys.

Example:
    >>> from mdinline.utils.hashing import hash_str
    >>> hash_str("hello")[:16]
    '2cf24dba5fb0a30e'
"""

import hashlib


def hash_str(content: str) -> str:
    """SHA-256 hex digest of ``content`` encoded as UTF-8."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
