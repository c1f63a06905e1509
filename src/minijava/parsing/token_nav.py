"""Token navigation and error reporting for the MiniJava parser.

Provides the mixin every production mixin builds on: the current token,
advancing through the lexer, and the two diagnostic shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minijava.diagnostics import Diagnostic
from minijava.errors import FatalSyntaxError
from minijava.tokens import Token, TokenType
from minijava.utils.logger import get_logger

if TYPE_CHECKING:
    from minijava.lexer import Lexer

logger = get_logger(__name__)


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token
        - _diagnostics: list[Diagnostic]
        - _error_token: Token | None

    """

    _lexer: Lexer
    _current: Token
    _diagnostics: list[Diagnostic]
    _error_token: Token | None

    def _advance(self) -> None:
        """Move to the next token."""
        self._current = self._lexer.next_token()

    def _at(self, *token_types: TokenType) -> bool:
        """Check whether the current token is one of the given types."""
        return self._current.type in token_types

    def _peek_type(self) -> TokenType:
        """Type of the token after the current one (two-token lookahead)."""
        return self._lexer.peek().type

    def _eat(self, token_type: TokenType) -> None:
        """Consume a token of the given type or fail hard.

        Raises:
            FatalSyntaxError: If the current token has a different type.
        """
        if self._current.type is token_type:
            self._advance()
        else:
            self._error(token_type)

    def _error(self, expected: TokenType | None = None) -> None:
        """Report a syntax error at the current token.

        With ``expected`` set this is an expected-token mismatch: it is
        recorded and FatalSyntaxError is raised. Without it, no grammar
        alternative matched: the error is recorded, the offending token is
        skipped (EOF is never skipped) and control returns to the caller.

        Each token object is reported at most once.
        """
        token = self._current
        if token is not self._error_token:
            self._error_token = token
            diagnostic = Diagnostic(token, expected)
            self._diagnostics.append(diagnostic)
            logger.debug("%s", diagnostic)
        else:
            diagnostic = Diagnostic(token, expected)

        if expected is not None:
            raise FatalSyntaxError(diagnostic)
        if token.type is not TokenType.EOF:
            self._advance()
