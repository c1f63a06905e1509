"""Identifier, reserved word, and integer literal scanner mixin."""

from __future__ import annotations

from collections.abc import Mapping

from minijava.lexer.charsets import DIGITS, WORD_CHARS
from minijava.tokens import Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier/keyword and integer literal scanning."""

    _char: str
    _keywords: Mapping[str, TokenType]

    def _advance_char(self) -> str:
        """Consume the current character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, lineno: int, col: int, value: str | None = None
    ) -> Token:
        """Create a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self, lineno: int, col: int) -> Token:
        """Scan ``[a-zA-Z][a-zA-Z0-9_]*`` starting at the current letter.

        Reserved words are matched exactly (case-sensitive) against the
        keyword table; anything else is an identifier carrying its spelling.
        """
        chars = [self._advance_char()]
        while self._char in WORD_CHARS:
            chars.append(self._advance_char())
        text = "".join(chars)

        keyword = self._keywords.get(text)
        if keyword is not None:
            return self._make_token(keyword, lineno, col)
        return self._make_token(TokenType.ID, lineno, col, text)

    def _scan_number(self, lineno: int, col: int) -> Token:
        """Scan ``[0-9]+``. The literal is kept as decimal text."""
        chars = [self._advance_char()]
        while self._char in DIGITS:
            chars.append(self._advance_char())
        return self._make_token(TokenType.NUM, lineno, col, "".join(chars))
