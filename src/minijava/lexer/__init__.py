"""Pull-based lexer for the MiniJava front end.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, open_source
├── core.py              # Lexer class (mixin composition + navigation)
├── charsets.py          # Character classes
└── scanners/            # Token-family scanners
    ├── word.py          # Identifiers, reserved words, integer literals
    ├── comment.py       # // and nestable /* */ comments
    └── symbol.py        # Operators, punctuation, unknown characters

Usage:
    >>> from minijava.lexer import Lexer
    >>> lexer = Lexer("x = 1;")
    >>> lexer.peek().type
    <TokenType.ID: 22>
    >>> lexer.next_token().value
    'x'

"""

from minijava.lexer.core import Lexer, open_source

__all__ = ["Lexer", "open_source"]
