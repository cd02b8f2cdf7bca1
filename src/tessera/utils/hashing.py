"""SHA-256 hashing for scan cache keys.

Example:
    >>> from tessera.utils.hashing import hash_str
    >>> hash_str("hello world")[:16]
    'b94d27b9934d3e08'
"""

import hashlib


def hash_bytes(content: bytes) -> str:
    """Return the SHA-256 hex digest of ``content``."""
    return hashlib.sha256(content).hexdigest()


def hash_str(content: str) -> str:
    """Return the SHA-256 hex digest of ``content`` encoded as UTF-8."""
    return hash_bytes(content.encode("utf-8"))
