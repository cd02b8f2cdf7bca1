"""Scanner states and delimiter byte constants.

This module defines the finite state machine states for the template
scanner. Every state is transient except MARKUP, which is the initial
state and the only proper accepting state.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Lexical modes of the template scanner.
    
    The scanner switches between states one byte at a time:
    - MARKUP: Literal text outside any code region
    - CODE: Embedded code between ``{{`` and ``}}``
    - STRING_*, BACKTICK*: Quoted contexts inside code
    - PERCENT_OPERATOR: A ``%...%`` infix operator token inside code
    - COMMENT*: A ``#`` line comment inside code
        
    """

    MARKUP = auto()
    MARKUP_SAW_OPEN_BRACE = auto()  # Saw one {
    CODE = auto()
    CODE_SAW_CLOSE_BRACE = auto()  # Saw one }
    STRING_SINGLE = auto()  # '...'
    STRING_SINGLE_ESCAPE = auto()
    STRING_DOUBLE = auto()  # "..."
    STRING_DOUBLE_ESCAPE = auto()
    BACKTICK = auto()  # `...`
    BACKTICK_ESCAPE = auto()
    PERCENT_OPERATOR = auto()  # %...%
    COMMENT = auto()  # # to end of line
    COMMENT_SAW_CLOSE_BRACE = auto()


# States a document may end in. A trailing lone { is literal text.
ACCEPTING_STATES = frozenset({ScanState.MARKUP, ScanState.MARKUP_SAW_OPEN_BRACE})

OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")
SINGLE_QUOTE = ord("'")
DOUBLE_QUOTE = ord('"')
BACKTICK = ord("`")
BACKSLASH = ord("\\")
PERCENT = ord("%")
HASH = ord("#")
NEWLINE = ord("\n")
