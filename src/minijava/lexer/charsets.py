"""Character sets for O(1) classification.

All sets are frozensets: O(1) membership, immutable, and the empty
string (end of stream) is never a member.

Usage:
    from minijava.lexer.charsets import LETTERS

    if char in LETTERS:  # O(1) lookup
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

# Identifier continuation: [a-zA-Z0-9_]
WORD_CHARS: frozenset[str] = LETTERS | DIGITS | frozenset("_")

NEWLINE_CHARS: frozenset[str] = frozenset("\r\n")

WHITESPACE: frozenset[str] = frozenset(" \t") | NEWLINE_CHARS
