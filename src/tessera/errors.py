"""Exception classes for Tessera.

Provides standardized exceptions for error handling throughout Tessera.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tessera.location import SourceLocation
    from tessera.scanner.modes import ScanState


class TesseraError(Exception):
    """Base exception for all Tessera errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidInputError(TesseraError, TypeError):
    """The document handed to the scanner is not exactly one text value.
    
    Raised before any scanning begins. Accepted inputs are ``str`` and
    bytes-like objects; lists, tuples, ``None`` and everything else are
    rejected.
    """

    def __init__(self, value: object) -> None:
        """Initialize with the rejected value.
        
        Args:
            value: The object that was passed as the document
        """
        self.value_type = type(value).__name__
        super().__init__(
            f"Template document must be a single str or bytes value, "
            f"got {self.value_type}"
        )


class UnterminatedCodeError(TesseraError):
    """End of document reached outside of markup.
    
    Raised when a code region opened with ``{{`` never sees its closing
    ``}}``, including when the document ends inside a string, a
    backtick-quoted identifier, a comment or a percent-operator token,
    or right after a single ``}``.
    """

    def __init__(
        self,
        state: ScanState,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize with the final automaton state and opening location.
        
        Args:
            state: State the scanner was in at end of document
            location: Location of the ``{{`` that opened the code region
        """
        self.state = state
        self.location = location
        self.offset = location.offset if location else None
        self.lineno = location.lineno if location else None
        self.col_offset = location.col_offset if location else None
        self.source_file = location.source_file if location else None

        prefix = f"{location} " if location is not None else ""

        super().__init__(
            f'{prefix}template did not end in markup state (missing closing "}}}}"; '
            f"scanner stopped in {state.name})"
        )
