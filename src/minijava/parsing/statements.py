"""Statement productions."""

from __future__ import annotations

from minijava.parsing.expressions import ExpressionParsingMixin
from minijava.tokens import TokenType

# Tokens that can begin a statement
STATEMENT_START = frozenset(
    {
        TokenType.LBRACE,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.SYSTEM,
        TokenType.ID,
    }
)


class StatementParsingMixin(ExpressionParsingMixin):
    """Mixin recognizing statements.

    Grammar::

        Statement := '{' Statement* '}'
                   | 'if' '(' Exp ')' Statement 'else' Statement
                   | 'while' '(' Exp ')' Statement
                   | 'System' '.' 'out' '.' 'println' '(' Exp ')' ';'
                   | ID '=' Exp ';'
                   | ID '[' Exp ']' '=' Exp ';'

    """

    def _parse_statements(self) -> None:
        while self._current.type in STATEMENT_START:
            self._parse_statement()

    def _parse_statement(self) -> None:
        token_type = self._current.type
        if token_type is TokenType.LBRACE:
            self._advance()
            self._parse_statements()
            self._eat(TokenType.RBRACE)
        elif token_type is TokenType.IF:
            self._advance()
            self._parse_condition()
            self._parse_statement()
            self._eat(TokenType.ELSE)
            self._parse_statement()
        elif token_type is TokenType.WHILE:
            self._advance()
            self._parse_condition()
            self._parse_statement()
        elif token_type is TokenType.SYSTEM:
            self._parse_print()
        elif token_type is TokenType.ID:
            self._parse_assignment()
        else:
            self._error()

    def _parse_condition(self) -> None:
        """'(' Exp ')' after ``if`` or ``while``."""
        self._eat(TokenType.LPAREN)
        self._parse_exp()
        self._eat(TokenType.RPAREN)

    def _parse_print(self) -> None:
        """System.out.println ( Exp ) ;"""
        for token_type in (
            TokenType.SYSTEM,
            TokenType.DOT,
            TokenType.OUT,
            TokenType.DOT,
            TokenType.PRINTLN,
            TokenType.LPAREN,
        ):
            self._eat(token_type)
        self._parse_exp()
        self._eat(TokenType.RPAREN)
        self._eat(TokenType.SEMI)

    def _parse_assignment(self) -> None:
        """ID = Exp ;  or  ID [ Exp ] = Exp ;"""
        self._advance()
        if self._at(TokenType.LBRACK):
            self._advance()
            self._parse_exp()
            self._eat(TokenType.RBRACK)
        elif not self._at(TokenType.ASSIGN):
            self._error()
            return
        self._eat(TokenType.ASSIGN)
        self._parse_exp()
        self._eat(TokenType.SEMI)
