"""Syntax diagnostics and the recognizer's end status.

Two diagnostic shapes exist:

- Expected-token mismatch (``expected`` set): fatal. Recognition halts at
  the offending token.
- Unexpected token (``expected`` is None): recoverable. Recorded, and the
  grammar rule that found no alternative returns to its caller.

"""

from __future__ import annotations

from dataclasses import dataclass

from minijava.errors import FatalSyntaxError, ParseError
from minijava.tokens import Token, TokenType


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported syntax error.

    Attributes:
        token: The token the parser was looking at
        expected: Token type the parser required, or None when no
            grammar alternative matched

    """

    token: Token
    expected: TokenType | None = None

    @property
    def fatal(self) -> bool:
        """Expected-token mismatches halt recognition."""
        return self.expected is not None

    def format(self) -> str:
        """Format as ``ERROR: <KIND> at line <L>, column <C>[; Expected <KIND>]``."""
        token = self.token
        message = f"ERROR: {token.type.name} at line {token.lineno}, column {token.col}"
        if self.expected is not None:
            message += f"; Expected {self.expected.name}"
        return message

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of recognizing one compilation unit.

    Attributes:
        diagnostics: Reported errors in source order
        halted: True when a fatal diagnostic stopped recognition
        source_file: Name used for diagnostic prefixes (optional)

    Example:
        >>> result = Parser(source).parse()
        >>> if not result.ok:
        ...     for line in result.messages():
        ...         print(line, file=sys.stderr)

    """

    diagnostics: tuple[Diagnostic, ...] = ()
    halted: bool = False
    source_file: str | None = None

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    @property
    def ok(self) -> bool:
        """True when the compilation unit was accepted without errors."""
        return not self.diagnostics

    def messages(self) -> list[str]:
        """Formatted diagnostic lines, prefixed with the source name if known."""
        prefix = f"{self.source_file}: " if self.source_file else ""
        return [prefix + diagnostic.format() for diagnostic in self.diagnostics]

    def raise_for_errors(self) -> None:
        """Raise for the first diagnostic, if any.

        Raises:
            FatalSyntaxError: If the first diagnostic is an expected-token mismatch
            ParseError: If the first diagnostic is an unexpected token
        """
        if not self.diagnostics:
            return
        first = self.diagnostics[0]
        if first.fatal:
            raise FatalSyntaxError(first)
        raise ParseError.from_diagnostic(first)
