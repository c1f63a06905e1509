"""Operator and punctuation scanner mixin."""

from __future__ import annotations

from collections.abc import Mapping

from minijava.tokens import OPERATORS, Token, TokenType


class SymbolScannerMixin:
    """Mixin providing operator, punctuation and unknown-character scanning."""

    _char: str
    _punctuation: Mapping[str, TokenType]

    def _advance_char(self) -> str:
        """Consume the current character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, lineno: int, col: int, value: str | None = None
    ) -> Token:
        """Create a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_symbol(self, lineno: int, col: int) -> Token:
        """Scan one operator or punctuation mark.

        ``&&`` is the only two-character operator. A lone ``&`` and any
        character outside the tables become UNKNOWN; exactly one character
        is consumed in both cases.
        """
        char = self._advance_char()
        if char == "&":
            if self._char == "&":
                self._advance_char()
                return self._make_token(TokenType.AND, lineno, col)
            return self._make_token(TokenType.UNKNOWN, lineno, col)

        token_type = OPERATORS.get(char) or self._punctuation.get(char)
        if token_type is None:
            return self._make_token(TokenType.UNKNOWN, lineno, col)
        return self._make_token(token_type, lineno, col)
