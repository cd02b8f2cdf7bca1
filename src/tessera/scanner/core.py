"""Single-pass template scanner with O(n) guaranteed performance.

Drives the DFA in ``tessera.scanner.table`` over the encoded document,
one byte at a time, and cuts a piece at every delimiter-completing
transition.

Scanning is byte-oriented. Every delimiter, quote, escape and comment
character is single-byte ASCII, and no byte of a multi-byte UTF-8
sequence is below 0x80, so piece boundaries always fall on character
boundaries and each piece can be decoded on its own. ScanConfig only
accepts codecs with the same property (UTF-8 and ASCII-compatible
single-byte codecs).

Thread Safety:
Scanner instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import logging

from tessera.config import ScanConfig, get_scan_config
from tessera.errors import InvalidInputError, UnterminatedCodeError
from tessera.location import SourceLocation
from tessera.pieces import Piece, PieceKind
from tessera.scanner.modes import ACCEPTING_STATES, ScanState
from tessera.scanner.table import TRANSITIONS

logger = logging.getLogger(__name__)


def encode_document(document: object, encoding: str = "utf-8") -> bytes:
    """Return the bytes the scanner will walk for ``document``.

    Args:
        document: A ``str`` or bytes-like object
        encoding: Codec for ``str`` input

    Returns:
        The encoded document

    Raises:
        InvalidInputError: If ``document`` is not a single text value
        UnicodeEncodeError: If a ``str`` document cannot be encoded, e.g. it
            holds a lone surrogate or characters outside a single-byte codec
    """
    if isinstance(document, str):
        return document.encode(encoding)
    if isinstance(document, (bytes, bytearray, memoryview)):
        return bytes(document)
    raise InvalidInputError(document)


class Scanner:
    """Template scanner splitting markup from embedded ``{{ code }}``.

    Usage:
            >>> [p.text for p in Scanner("a{{1}}b{{2}}c").scan()]
            ['a', '1', 'b', '2', 'c']

    The result always has odd length and alternates MARKUP, CODE, ...,
    MARKUP. A document that ends anywhere other than markup raises
    UnterminatedCodeError; a trailing lone ``{`` is literal text.

    Thread Safety:
        Scanner instances are single-use. Create one per document.

    """

    __slots__ = (
        "_data",
        "_data_len",
        "_encoding",
        "_trace",
        "_source_file",
    )

    def __init__(
        self,
        document: str | bytes,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with a template document.

        Args:
            document: Template text (``str``) or its encoded bytes
            source_file: Optional source file path for error messages
            config: Scan configuration (defaults to the context config)

        Raises:
            InvalidInputError: If ``document`` is not a single text value
        """
        if config is None:
            config = get_scan_config()
        self._encoding = config.encoding
        self._trace = config.trace
        self._source_file = source_file
        self._data = encode_document(document, self._encoding)
        self._data_len = len(self._data)

    def scan(self) -> tuple[Piece, ...]:
        """Scan the whole document into pieces.

        Returns:
            Pieces in document order, alternating MARKUP and CODE

        Raises:
            UnterminatedCodeError: If the document ends inside code

        Complexity: O(n) where n = number of bytes
        """
        data = self._data
        trace = self._trace
        # Table lookups inlined from table.transition for the hot loop
        table = TRANSITIONS

        pieces: list[Piece] = []
        state = ScanState.MARKUP
        edges, default = table[state]
        piece_start = 0
        code_opened_at = 0

        for i, byte in enumerate(data):
            next_state, boundary = edges.get(byte, default)
            if boundary:
                # i is the second byte of the delimiter
                if next_state is ScanState.CODE:
                    pieces.append(self._make_piece(PieceKind.MARKUP, piece_start, i - 1))
                    code_opened_at = i - 1
                else:
                    pieces.append(self._make_piece(PieceKind.CODE, piece_start, i - 1))
                piece_start = i + 1
            if next_state is not state:
                if trace:
                    logger.debug(
                        "byte %d (%r): %s -> %s", i, chr(byte), state.name, next_state.name
                    )
                state = next_state
                edges, default = table[state]

        if state not in ACCEPTING_STATES:
            raise UnterminatedCodeError(
                state,
                SourceLocation.from_offset(
                    data, code_opened_at, self._encoding, self._source_file
                ),
            )

        pieces.append(self._make_piece(PieceKind.MARKUP, piece_start, self._data_len))
        logger.debug("Scanned %d bytes into %d pieces", self._data_len, len(pieces))
        return tuple(pieces)

    def _make_piece(self, kind: PieceKind, start: int, end: int) -> Piece:
        return Piece(kind, self._data[start:end].decode(self._encoding), start, end)
