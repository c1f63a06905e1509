"""Token scanners for the MiniJava lexer.

Each scanner is a mixin that recognizes one family of tokens starting at
the lexer's current character.
"""

from __future__ import annotations

from minijava.lexer.scanners.comment import CommentScannerMixin
from minijava.lexer.scanners.symbol import SymbolScannerMixin
from minijava.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "SymbolScannerMixin",
    "WordScannerMixin",
]
