"""Recursive descent productions for the MiniJava recognizer.

Each mixin layers one part of the grammar on top of the previous one:
token navigation, expressions, statements, declarations.
"""

from minijava.parsing.declarations import DeclarationParsingMixin
from minijava.parsing.expressions import ExpressionParsingMixin
from minijava.parsing.statements import StatementParsingMixin
from minijava.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "DeclarationParsingMixin",
    "ExpressionParsingMixin",
    "StatementParsingMixin",
    "TokenNavigationMixin",
]
