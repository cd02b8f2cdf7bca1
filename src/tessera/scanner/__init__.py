"""State-machine scanner for ``{{ code }}`` templates.

This package splits a template into alternating markup and code pieces
with a single deterministic pass over the document's bytes.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScanState, transition
├── core.py              # Scanner class (drives the table, cuts pieces)
├── modes.py             # ScanState enum, delimiter byte constants
└── table.py             # DFA transition table + pure transition()

Usage:
    >>> from tessera.scanner import Scanner
    >>> for piece in Scanner("Hello {{ name }}!").scan():
    ...     print(repr(piece))
Piece(MARKUP, 'Hello ', 0:6)
Piece(CODE, ' name ', 8:14)
Piece(MARKUP, '!', 16:17)

"""

from tessera.scanner.core import Scanner, encode_document
from tessera.scanner.modes import ACCEPTING_STATES, ScanState
from tessera.scanner.table import TRANSITIONS, transition

__all__ = [
    "ACCEPTING_STATES",
    "ScanState",
    "Scanner",
    "TRANSITIONS",
    "encode_document",
    "transition",
]
