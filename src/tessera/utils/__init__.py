"""Utility modules for Tessera.

Provides:
- hashing: hash_str, hash_bytes for cache keys
"""

from tessera.utils.hashing import hash_bytes, hash_str

__all__ = [
    "hash_bytes",
    "hash_str",
]
