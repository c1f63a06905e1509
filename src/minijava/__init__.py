"""
MiniJava: syntactic front end for a small Java-like teaching language.

Converts program text into classified tokens and checks that the token
stream forms a syntactically valid program, reporting where it does not.

Quick Start:
    >>> from minijava import check, tokenize
    >>> result = check("class A { public static void main(String[] a) { "
    ...                "System.out.println(1+2*3); } }")
    >>> result.ok
    True

    >>> [t.type.name for t in tokenize("x && !y")]
    ['ID', 'AND', 'NOT', 'ID', 'EOF']

Command line:
    minijava-check Factorial.java --dump-tokens
"""

from dataclasses import replace

from minijava.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from minijava.diagnostics import Diagnostic, ParseResult
from minijava.errors import FatalSyntaxError, MiniJavaError, ParseError
from minijava.lexer import Lexer
from minijava.lexer.core import Source
from minijava.location import SourceLocation
from minijava.parser import Parser
from minijava.tokens import KEYWORDS, PUNCTUATION, Token, TokenType

__version__ = "0.3.0"


def tokenize(source: Source, *, source_file: str | None = None) -> list[Token]:
    """Tokenize a whole compilation unit.

    Args:
        source: Program text, UTF-8 bytes, or a readable stream
        source_file: Optional source name for diagnostics

    Returns:
        Tokens in source order, ending with a single EOF token.
    """
    return list(Lexer(source, source_file).tokenize())


def check(
    source: Source,
    *,
    source_file: str | None = None,
    trace_tokens: bool = False,
) -> ParseResult:
    """Check that a compilation unit is a syntactically valid program.

    Args:
        source: Program text, UTF-8 bytes, or a readable stream
        source_file: Optional source name for diagnostic prefixes
        trace_tokens: Write each produced token to standard output

    Returns:
        ParseResult with diagnostics and end status

    Example:
        >>> result = check("class A", source_file="A.java")
        >>> result.messages()
        ['A.java: ERROR: EOF at line 1, column 8; Expected LBRACE']
    """
    config = get_parse_config()
    if trace_tokens != config.trace_tokens:
        config = replace(config, trace_tokens=trace_tokens)
    with parse_config_context(config):
        return Parser(source, source_file).parse()


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "check",
    "tokenize",
    # Components
    "Lexer",
    "Parser",
    # Tokens
    "KEYWORDS",
    "PUNCTUATION",
    "Source",
    "Token",
    "TokenType",
    # Results and errors
    "Diagnostic",
    "FatalSyntaxError",
    "MiniJavaError",
    "ParseError",
    "ParseResult",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
]
