"""Expression productions.

The precedence ladder, lowest to highest::

    Exp        := AndExp ('&&' AndExp)*
    AndExp     := LtExp ('<' LtExp)*
    LtExp      := AddSubExp (('+'|'-') AddSubExp)*
    AddSubExp  := TimesExp ('*' TimesExp)*
    TimesExp   := '!'* NotExp
    NotExp     := PrimaryExp ('.' ID '(' ExpList ')' | '[' Exp ']' | '.' 'length')*

Each level is named after the operand it supplies to the level above. Binary
levels fold left iteratively, which keeps every operator left-associative
without left recursion.
"""

from __future__ import annotations

from minijava.parsing.token_nav import TokenNavigationMixin
from minijava.tokens import TokenType


class ExpressionParsingMixin(TokenNavigationMixin):
    """Mixin recognizing expressions and expression lists."""

    def _parse_exp(self) -> None:
        """Exp := AndExp ('&&' AndExp)*"""
        self._parse_and_exp()
        while self._at(TokenType.AND):
            self._advance()
            self._parse_and_exp()

    def _parse_and_exp(self) -> None:
        """AndExp := LtExp ('<' LtExp)*"""
        self._parse_lt_exp()
        while self._at(TokenType.LT):
            self._advance()
            self._parse_lt_exp()

    def _parse_lt_exp(self) -> None:
        """LtExp := AddSubExp (('+'|'-') AddSubExp)*"""
        self._parse_add_sub_exp()
        while self._at(TokenType.ADD, TokenType.SUB):
            self._advance()
            self._parse_add_sub_exp()

    def _parse_add_sub_exp(self) -> None:
        """AddSubExp := TimesExp ('*' TimesExp)*"""
        self._parse_times_exp()
        while self._at(TokenType.TIMES):
            self._advance()
            self._parse_times_exp()

    def _parse_times_exp(self) -> None:
        """TimesExp := '!'* NotExp"""
        while self._at(TokenType.NOT):
            self._advance()
        self._parse_not_exp()

    def _parse_not_exp(self) -> None:
        """Primary expression followed by calls, indexing and ``.length``."""
        self._parse_primary_exp()
        while self._at(TokenType.DOT, TokenType.LBRACK):
            if self._at(TokenType.LBRACK):
                self._advance()
                self._parse_exp()
                self._eat(TokenType.RBRACK)
                continue

            self._advance()
            if self._at(TokenType.LENGTH):
                self._advance()
                continue
            self._eat(TokenType.ID)
            self._eat(TokenType.LPAREN)
            self._parse_exp_list()
            self._eat(TokenType.RPAREN)

    def _parse_primary_exp(self) -> None:
        """Atoms, parenthesized expressions and ``new`` allocations."""
        token_type = self._current.type
        if token_type is TokenType.LPAREN:
            self._advance()
            self._parse_exp()
            self._eat(TokenType.RPAREN)
        elif token_type in (
            TokenType.NUM,
            TokenType.TRUE,
            TokenType.FALSE,
            TokenType.THIS,
            TokenType.ID,
        ):
            self._advance()
        elif token_type is TokenType.NEW:
            self._advance()
            self._parse_allocation()
        else:
            self._error()

    def _parse_allocation(self) -> None:
        """``int '[' Exp ']'`` or ``ID '(' ')'`` after ``new``."""
        if self._at(TokenType.INT):
            self._advance()
            self._eat(TokenType.LBRACK)
            self._parse_exp()
            self._eat(TokenType.RBRACK)
        elif self._at(TokenType.ID):
            self._advance()
            self._eat(TokenType.LPAREN)
            self._eat(TokenType.RPAREN)
        else:
            self._error()

    def _parse_exp_list(self) -> None:
        """ExpList := (Exp (',' Exp)*)?"""
        if self._at(TokenType.RPAREN):
            return
        self._parse_exp()
        while self._at(TokenType.COMMA):
            self._advance()
            self._parse_exp()
