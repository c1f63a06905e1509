"""Comment scanner mixin.

Handles everything that starts with ``/``: line comments, nestable block
comments, and the lone slash (which the language has no use for).
"""

from __future__ import annotations

from minijava.lexer.charsets import NEWLINE_CHARS
from minijava.tokens import Token, TokenType


class CommentScannerMixin:
    """Mixin providing comment skipping."""

    _char: str

    def _advance_char(self) -> str:
        """Consume the current character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self, token_type: TokenType, lineno: int, col: int, value: str | None = None
    ) -> Token:
        """Create a token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_slash(self, lineno: int, col: int) -> Token | None:
        """Skip a comment starting at the current ``/``.

        Returns:
            None if a comment was skipped (the caller rescans), or an
            UNKNOWN token if the ``/`` does not start a comment. In that
            case only the ``/`` is consumed.
        """
        self._advance_char()
        if self._char == "/":
            self._skip_line_comment()
            return None
        if self._char == "*":
            self._skip_block_comment()
            return None
        return self._make_token(TokenType.UNKNOWN, lineno, col)

    def _skip_line_comment(self) -> None:
        """Skip from the second ``/`` through the end of the line."""
        while self._char and self._char not in NEWLINE_CHARS:
            self._advance_char()
        if self._char:
            # Consumes \r\n as a single break
            self._advance_char()

    def _skip_block_comment(self) -> None:
        """Skip a nestable ``/* ... */`` comment from its ``*``.

        Each inner ``/*`` opens another level and each ``*/`` closes one;
        the comment ends when the depth returns to zero. An unterminated
        comment silently runs to the end of the stream.
        """
        self._advance_char()
        depth = 1
        while depth > 0:
            char = self._char
            if not char:
                return
            self._advance_char()
            if char == "/" and self._char == "*":
                self._advance_char()
                depth += 1
            elif char == "*" and self._char == "/":
                self._advance_char()
                depth -= 1
