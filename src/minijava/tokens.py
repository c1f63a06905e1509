"""Token and TokenType definitions for the MiniJava lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, a source position, and (for identifiers and
integer literals only) the spelled text.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum and the lookup tables are read-only mappings.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minijava.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Reserved words (21)
    - Identifiers and literals
    - Stream markers (EOF, UNKNOWN)
    - Punctuation (11)
    - Operators (5)

    """

    # Reserved words
    BOOLEAN = auto()
    CLASS = auto()
    ELSE = auto()
    EXTENDS = auto()
    FALSE = auto()
    IF = auto()
    INT = auto()
    LENGTH = auto()
    MAIN = auto()
    NEW = auto()
    OUT = auto()
    PRINTLN = auto()
    PUBLIC = auto()
    RETURN = auto()
    STATIC = auto()
    STRING = auto()
    SYSTEM = auto()
    THIS = auto()
    TRUE = auto()
    VOID = auto()
    WHILE = auto()

    # Identifiers and literals
    ID = auto()  # [a-zA-Z][a-zA-Z0-9_]*
    NUM = auto()  # [0-9]+

    # Stream markers
    EOF = auto()
    UNKNOWN = auto()

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACK = auto()  # [
    RBRACK = auto()  # ]
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    SEMI = auto()  # ;
    COMMA = auto()  # ,
    DOT = auto()  # .
    ASSIGN = auto()  # =
    NOT = auto()  # !

    # Operators
    ADD = auto()  # +
    SUB = auto()  # -
    TIMES = auto()  # *
    LT = auto()  # <
    AND = auto()  # &&


# Only these kinds carry the spelled source text
VALUED_TYPES = frozenset({TokenType.ID, TokenType.NUM})

KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "boolean": TokenType.BOOLEAN,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "extends": TokenType.EXTENDS,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "int": TokenType.INT,
        "length": TokenType.LENGTH,
        "main": TokenType.MAIN,
        "new": TokenType.NEW,
        "out": TokenType.OUT,
        "println": TokenType.PRINTLN,
        "public": TokenType.PUBLIC,
        "return": TokenType.RETURN,
        "static": TokenType.STATIC,
        "String": TokenType.STRING,
        "System": TokenType.SYSTEM,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "void": TokenType.VOID,
        "while": TokenType.WHILE,
    }
)

PUNCTUATION: Mapping[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "[": TokenType.LBRACK,
        "]": TokenType.RBRACK,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        ";": TokenType.SEMI,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "=": TokenType.ASSIGN,
        "!": TokenType.NOT,
    }
)

# Single-character operators; '&&' is scanned separately
OPERATORS: Mapping[str, TokenType] = MappingProxyType(
    {
        "+": TokenType.ADD,
        "-": TokenType.SUB,
        "*": TokenType.TIMES,
        "<": TokenType.LT,
    }
)


@dataclass(frozen=True, slots=True, eq=False)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to parser.

    Attributes:
        type: The token type (from TokenType enum)
        lineno: Line number of the first character (1-indexed)
        col: Column of the first character (1-indexed)
        value: Identifier spelling or decimal digits; None for other kinds
        source_file: Optional source file name for diagnostics

    Identity:
        Tokens compare by identity, not by field values. The parser
        suppresses repeated diagnostics for the *same* token object, so
        two tokens at the same position are still distinct tokens.
        Use ``same_as`` to compare contents.

    """

    type: TokenType
    lineno: int
    col: int
    value: str | None = None
    source_file: str | None = None

    def __post_init__(self) -> None:
        if (self.value is not None) != (self.type in VALUED_TYPES):
            raise ValueError(f"{self.type.name} token cannot carry value {self.value!r}")

    @property
    def location(self) -> SourceLocation:
        """Source location of the token's first character."""
        from minijava.location import SourceLocation

        return SourceLocation(
            lineno=self.lineno, col_offset=self.col, source_file=self.source_file
        )

    def same_as(self, other: Token) -> bool:
        """Compare kind, position and payload (ignores identity)."""
        return (
            self.type is other.type
            and self.lineno == other.lineno
            and self.col == other.col
            and self.value == other.value
        )

    def __str__(self) -> str:
        """Human-readable form used by token tracing."""
        if self.value is None:
            return f"{self.type.name} at {self.lineno}:{self.col}"
        return f"{self.type.name}({self.value}) at {self.lineno}:{self.col}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.value!r}, {self.lineno}:{self.col})"
