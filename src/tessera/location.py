"""Source location tracking for error messages.

Provides SourceLocation dataclass for pointing at a position in a template.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.
    
    ``lineno`` and ``col_offset`` are 1-indexed and counted in characters.
    ``offset`` is the 0-indexed byte offset into the encoded document,
    which is the unit the scanner works in.
    
    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset in characters (1-indexed)
        offset: Absolute byte offset in the encoded document
        source_file: Source file path (optional)
    
    Examples:
            >>> loc = SourceLocation(3, 7, 41, "page.html")
            >>> str(loc)
            'page.html:3:7'
    
    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "page.html:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        data: bytes,
        offset: int,
        encoding: str = "utf-8",
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute line and column for a byte offset in an encoded document.

        Args:
            data: The encoded document
            offset: Byte offset to locate
            encoding: Codec used to count characters on the line
            source_file: Optional source file path

        Returns:
            SourceLocation for the offset
        """
        line_start = data.rfind(b"\n", 0, offset) + 1
        lineno = data.count(b"\n", 0, offset) + 1
        col = len(data[line_start:offset].decode(encoding, errors="replace")) + 1
        return cls(lineno=lineno, col_offset=col, offset=offset, source_file=source_file)
