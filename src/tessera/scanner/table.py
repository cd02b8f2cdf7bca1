"""DFA transition table for the template scanner.

Each state maps to a pair ``(edges, default)``: ``edges`` maps an input
byte to an outcome, and ``default`` is the outcome for every other byte.
An outcome is ``(next_state, boundary)`` where ``boundary`` is True only
on the two delimiter-completing transitions (``{{`` into CODE and ``}}``
back into MARKUP).

Only ASCII bytes appear as edges, so bytes of a multi-byte UTF-8
sequence (all >= 0x80) always take the default outcome.

Thread Safety:
The table is built once at import time and never mutated.

"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from tessera.scanner.modes import (
    BACKSLASH,
    BACKTICK,
    CLOSE_BRACE,
    DOUBLE_QUOTE,
    HASH,
    NEWLINE,
    OPEN_BRACE,
    PERCENT,
    SINGLE_QUOTE,
    ScanState,
)

Outcome = tuple[ScanState, bool]

S = ScanState


def _stay(state: ScanState) -> Outcome:
    return (state, False)


def _quoted(state: ScanState, escape: ScanState, quote: int) -> tuple[dict[int, Outcome], Outcome]:
    return ({BACKSLASH: (escape, False), quote: (S.CODE, False)}, _stay(state))


_RAW_TABLE: dict[ScanState, tuple[dict[int, Outcome], Outcome]] = {
    S.MARKUP: ({OPEN_BRACE: (S.MARKUP_SAW_OPEN_BRACE, False)}, _stay(S.MARKUP)),
    S.MARKUP_SAW_OPEN_BRACE: ({OPEN_BRACE: (S.CODE, True)}, (S.MARKUP, False)),
    S.CODE: (
        {
            CLOSE_BRACE: (S.CODE_SAW_CLOSE_BRACE, False),
            SINGLE_QUOTE: (S.STRING_SINGLE, False),
            DOUBLE_QUOTE: (S.STRING_DOUBLE, False),
            BACKTICK: (S.BACKTICK, False),
            PERCENT: (S.PERCENT_OPERATOR, False),
            HASH: (S.COMMENT, False),
        },
        _stay(S.CODE),
    ),
    # The byte after a lone } is not re-dispatched through CODE's edges
    S.CODE_SAW_CLOSE_BRACE: ({CLOSE_BRACE: (S.MARKUP, True)}, (S.CODE, False)),
    S.STRING_SINGLE: _quoted(S.STRING_SINGLE, S.STRING_SINGLE_ESCAPE, SINGLE_QUOTE),
    S.STRING_SINGLE_ESCAPE: ({}, (S.STRING_SINGLE, False)),
    S.STRING_DOUBLE: _quoted(S.STRING_DOUBLE, S.STRING_DOUBLE_ESCAPE, DOUBLE_QUOTE),
    S.STRING_DOUBLE_ESCAPE: ({}, (S.STRING_DOUBLE, False)),
    S.BACKTICK: _quoted(S.BACKTICK, S.BACKTICK_ESCAPE, BACKTICK),
    S.BACKTICK_ESCAPE: ({}, (S.BACKTICK, False)),
    # No escape handling inside an operator token
    S.PERCENT_OPERATOR: ({PERCENT: (S.CODE, False)}, _stay(S.PERCENT_OPERATOR)),
    S.COMMENT: (
        {
            CLOSE_BRACE: (S.COMMENT_SAW_CLOSE_BRACE, False),
            NEWLINE: (S.CODE, False),
        },
        _stay(S.COMMENT),
    ),
    # A comment that reaches }} still closes the code region
    S.COMMENT_SAW_CLOSE_BRACE: ({CLOSE_BRACE: (S.MARKUP, True)}, (S.COMMENT, False)),
}

TRANSITIONS: Mapping[ScanState, tuple[Mapping[int, Outcome], Outcome]] = MappingProxyType(
    {state: (MappingProxyType(edges), default) for state, (edges, default) in _RAW_TABLE.items()}
)


def transition(state: ScanState, byte: int) -> Outcome:
    """Advance the automaton by one byte.

    Pure function: the result depends only on ``state`` and ``byte``.

    Args:
        state: Current scanner state
        byte: Input byte (0-255)

    Returns:
        ``(next_state, boundary)``; ``boundary`` is True when this byte
        completes a ``{{`` or ``}}`` delimiter.

    Example:
        >>> transition(ScanState.MARKUP_SAW_OPEN_BRACE, ord("{"))
        (<ScanState.CODE: 3>, True)
    """
    edges, default = TRANSITIONS[state]
    return edges.get(byte, default)


__all__ = ["Outcome", "TRANSITIONS", "transition"]
