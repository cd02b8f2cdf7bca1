"""Content-addressed scan cache for Tessera.

Provides (content_hash, config_hash) -> pieces caching so that a template
rendered many times is only scanned once.

Thread Safety:
    DictScanCache is not thread-safe. For parallel scanning, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from tessera import scan_pieces, DictScanCache
    >>> cache = DictScanCache()
    >>> first = scan_pieces("a{{1}}b", cache=cache)
    >>> second = scan_pieces("a{{1}}b", cache=cache)  # Cache hit, no re-scan
    >>> first is second
    True
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Protocol

from tessera.utils.hashing import hash_bytes, hash_str

if TYPE_CHECKING:
    from tessera.config import ScanConfig
    from tessera.pieces import Piece


class ScanCache(Protocol):
    """Protocol for content-addressed scan caches.

    Cache key is (content_hash, config_hash). Cached value is the tuple of
    pieces, which is immutable and safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> tuple[Piece, ...] | None:
        """Return cached pieces if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, pieces: tuple[Piece, ...]) -> None:
        """Store pieces in cache."""
        ...


class DictScanCache:
    """In-memory scan cache using a dict.

    Not thread-safe. For parallel scanning, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], tuple[Piece, ...]] = {}

    def get(self, content_hash: str, config_hash: str) -> tuple[Piece, ...] | None:
        """Return cached pieces if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, pieces: tuple[Piece, ...]) -> None:
        """Store pieces in cache."""
        self._data[(content_hash, config_hash)] = pieces

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()


def hash_content(data: bytes) -> str:
    """Compute SHA256 hash of an encoded document for cache key."""
    return hash_bytes(data)


def hash_config(config: ScanConfig) -> str:
    """Compute hash of ScanConfig for cache key.

    Only the encoding changes scan output; ``trace`` affects logging alone
    and is left out of the key.
    """
    return hash_str(codecs.lookup(config.encoding).name)


__all__ = [
    "DictScanCache",
    "ScanCache",
    "hash_config",
    "hash_content",
]
