"""ContextVar-based scan configuration for Tessera.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every scan in the current context unless a call passes
its own ``config=``.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tessera.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(encoding="latin-1")):
        pieces = scan(document)

"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from functools import lru_cache


@lru_cache(maxsize=32)
def is_scannable_encoding(encoding: str) -> bool:
    """Return True if delimiter bytes can never sit inside a multi-byte character.

    UTF-8 qualifies because every byte of a multi-byte sequence is >= 0x80.
    Otherwise the codec must map ASCII to itself and decode every single byte
    on its own, which rules out Shift_JIS, GBK, Big5, ISO-2022 and friends
    whose trail bytes or escape sequences reuse ASCII values.

    Raises:
        LookupError: If the codec is unknown
    """
    name = codecs.lookup(encoding).name
    if name == "utf-8":
        return True
    if "{}'\"`\\%#\n".encode(encoding, errors="replace") != b"{}'\"`\\%#\n":
        return False
    for byte in range(256):
        decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        if not decoder.decode(bytes([byte])):
            return False
    return True


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        encoding: Codec used to encode ``str`` documents and decode piece
            text. Must be UTF-8 or an ASCII-compatible single-byte codec
            (see is_scannable_encoding).
        trace: Log every state change at DEBUG level

    """

    encoding: str = "utf-8"
    trace: bool = False

    def __post_init__(self) -> None:
        if not is_scannable_encoding(self.encoding):
            raise ValueError(
                f"Encoding {self.encoding!r} cannot be scanned byte by byte; "
                "use UTF-8 or an ASCII-compatible single-byte codec"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"trace": True, "unknown_key": 1}).trace
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(trace=True)):
        ...     get_scan_config().trace
        True
        >>> get_scan_config().trace
        False

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "is_scannable_encoding",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
