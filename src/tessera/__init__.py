"""
Tessera — Template scanner for ``{{ code }}`` documents

Splits a template into an alternating sequence of literal markup and
embedded code, ready for a rendering engine to compile the code pieces
and stitch the results back between the markup.

Quick Start:
    >>> from tessera import scan, reassemble
    >>> pieces = scan("<p>{{ greeting }}, {{ name }}!</p>")
    >>> pieces
    ('<p>', ' greeting ', ', ', ' name ', '!</p>')
    >>> reassemble(pieces)
    '<p>{{ greeting }}, {{ name }}!</p>'

Tagged pieces:
    >>> from tessera import scan_pieces
    >>> [p.kind.name for p in scan_pieces("a{{1}}b")]
    ['MARKUP', 'CODE', 'MARKUP']

The scanner knows enough of the embedded code language to stay blind to
``}}`` inside quoted strings, backtick-quoted identifiers, ``#`` comments
and ``%...%`` operator tokens.
"""

import logging

from tessera.cache import DictScanCache, ScanCache, hash_config, hash_content
from tessera.config import (
    ScanConfig,
    get_scan_config,
    is_scannable_encoding,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from tessera.errors import InvalidInputError, TesseraError, UnterminatedCodeError
from tessera.location import SourceLocation
from tessera.pieces import Piece, PieceKind, code_pieces, kind_at, markup_pieces, reassemble
from tessera.scanner import Scanner, ScanState, encode_document, transition

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def scan_pieces(
    document: str | bytes,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
    cache: ScanCache | None = None,
) -> tuple[Piece, ...]:
    """Scan a template into tagged pieces.

    Args:
        document: Template text, or its bytes in the configured encoding
        source_file: Optional source file path for error messages
        config: Scan configuration (defaults to the context config)
        cache: Optional content-addressed scan cache. When provided, checks
            the cache before scanning; on miss, scans and stores the result.
            Failed scans are never stored.

    Returns:
        Pieces alternating MARKUP and CODE, starting and ending with MARKUP

    Raises:
        InvalidInputError: If ``document`` is not a single text value
        UnterminatedCodeError: If a code region is never closed

    Example:
        >>> [str(p) for p in scan_pieces("x{{ `}}` }}y")]
        ['x', ' `}}` ', 'y']
    """
    if config is None:
        config = get_scan_config()

    if cache is None:
        return Scanner(document, source_file=source_file, config=config).scan()

    data = encode_document(document, config.encoding)
    content_hash = hash_content(data)
    config_hash = hash_config(config)
    cached = cache.get(content_hash, config_hash)
    if cached is not None:
        logger.debug("Scan cache hit for %s", content_hash[:16])
        return cached

    pieces = Scanner(data, source_file=source_file, config=config).scan()
    cache.put(content_hash, config_hash, pieces)
    return pieces


def scan(
    document: str | bytes,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
    cache: ScanCache | None = None,
) -> tuple[str, ...]:
    """Scan a template into plain text pieces.

    Even indexes (0-based) are markup, odd indexes are code. The result
    always has odd length.

    Example:
        >>> scan("a{{1}}b{{2}}c")
        ('a', '1', 'b', '2', 'c')
        >>> scan("a{")
        ('a{',)
    """
    pieces = scan_pieces(document, source_file=source_file, config=config, cache=cache)
    return tuple(p.text for p in pieces)


__all__ = [
    # Scanning
    "scan",
    "scan_pieces",
    "Scanner",
    "ScanState",
    "encode_document",
    "transition",
    # Pieces
    "Piece",
    "PieceKind",
    "code_pieces",
    "kind_at",
    "markup_pieces",
    "reassemble",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "is_scannable_encoding",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Cache
    "DictScanCache",
    "ScanCache",
    "hash_config",
    "hash_content",
    # Errors
    "InvalidInputError",
    "TesseraError",
    "UnterminatedCodeError",
    # Location
    "SourceLocation",
    "__version__",
]
