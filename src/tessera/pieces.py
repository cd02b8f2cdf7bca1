"""Piece and PieceKind definitions for scanner output.

The scanner splits a template into Pieces. Kinds strictly alternate,
starting and ending with MARKUP, so a scan result always has odd length:
even indexes (0-based) are markup, odd indexes are code.

Thread Safety:
Piece is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

OPEN_DELIMITER = "{{"
CLOSE_DELIMITER = "}}"


class PieceKind(Enum):
    """Classification of a scanned piece."""

    MARKUP = "markup"  # Literal text, rendered as-is
    CODE = "code"  # Embedded code between {{ and }}


@dataclass(frozen=True, slots=True)
class Piece:
    """A contiguous, non-overlapping segment of a template.

    Attributes:
        kind: MARKUP or CODE
        text: Decoded piece text, delimiters excluded
        start: Byte offset of the first byte of the piece
        end: Byte offset one past the last byte of the piece

    Offsets are in bytes of the encoded document, not characters.

    """

    kind: PieceKind
    text: str
    start: int
    end: int

    @property
    def is_code(self) -> bool:
        return self.kind is PieceKind.CODE

    @property
    def is_markup(self) -> bool:
        return self.kind is PieceKind.MARKUP

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Piece({self.kind.name}, {val!r}, {self.start}:{self.end})"


def kind_at(index: int) -> PieceKind:
    """Return the kind of the piece at ``index`` in a scan result."""
    return PieceKind.CODE if index % 2 else PieceKind.MARKUP


def reassemble(pieces: Sequence[str | Piece]) -> str:
    """Rebuild the original document from a scan result.

    Inserts ``{{`` before and ``}}`` after every code piece.

    Args:
        pieces: Plain strings or Piece objects, in scan order

    Returns:
        The document text

    Raises:
        ValueError: If ``pieces`` has even length

    Example:
        >>> reassemble(["a", "1", "b"])
        'a{{1}}b'
    """
    if len(pieces) % 2 == 0:
        raise ValueError(
            f"Scan results have odd length (markup, code, ..., markup); got {len(pieces)} pieces"
        )
    parts: list[str] = []
    for i, piece in enumerate(pieces):
        text = str(piece)
        if i % 2:
            parts.append(OPEN_DELIMITER)
            parts.append(text)
            parts.append(CLOSE_DELIMITER)
        else:
            parts.append(text)
    return "".join(parts)


def markup_pieces(pieces: Iterable[str | Piece]) -> list[str]:
    """Return the markup texts of a scan result, in order."""
    return [str(p) for i, p in enumerate(pieces) if i % 2 == 0]


def code_pieces(pieces: Iterable[str | Piece]) -> list[str]:
    """Return the code texts of a scan result, in order."""
    return [str(p) for i, p in enumerate(pieces) if i % 2 == 1]


__all__ = [
    "CLOSE_DELIMITER",
    "OPEN_DELIMITER",
    "Piece",
    "PieceKind",
    "code_pieces",
    "kind_at",
    "markup_pieces",
    "reassemble",
]
