"""Recursive descent recognizer for MiniJava.

Pulls tokens from the Lexer one at a time and checks them against the
grammar. No tree is built: the only results are the diagnostics and
whether recognition halted.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal and error reporting
- `ExpressionParsingMixin`: The expression precedence ladder
- `StatementParsingMixin`: Statements
- `DeclarationParsingMixin`: Program, classes, methods, declarations

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
compilation unit. Configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from typing import IO

from minijava.diagnostics import Diagnostic, ParseResult
from minijava.errors import FatalSyntaxError
from minijava.lexer import Lexer
from minijava.lexer.core import Source
from minijava.parsing import DeclarationParsingMixin
from minijava.tokens import Token
from minijava.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(DeclarationParsingMixin):
    """Recursive descent recognizer for MiniJava.

    Usage:
            >>> result = Parser(source, "Factorial.java").parse()
            >>> result.ok
            True

    Error Handling:
        An expected-token mismatch halts recognition: ``parse()`` returns a
        result with ``halted`` set and the mismatch as the last diagnostic.
        A token that matches no grammar alternative is reported, skipped,
        and recognition continues.

    """

    __slots__ = (
        "_lexer",
        "_current",
        "_diagnostics",
        "_error_token",
        "_source_file",
        "_result",
    )

    def __init__(
        self,
        source: Source,
        source_file: str | None = None,
        *,
        trace: IO[str] | None = None,
    ) -> None:
        """Initialize parser with a program source.

        Args:
            source: Program text, UTF-8 bytes, or a readable stream
            source_file: Optional source name for diagnostics
            trace: Token trace sink, passed to the Lexer
        """
        self._lexer = Lexer(source, source_file, trace=trace)
        self._source_file = source_file
        self._diagnostics: list[Diagnostic] = []
        self._error_token: Token | None = None
        self._result: ParseResult | None = None

    def parse(self) -> ParseResult:
        """Recognize one compilation unit.

        Returns:
            ParseResult with the diagnostics in source order. Calling
            ``parse()`` again returns the same result.
        """
        if self._result is not None:
            return self._result

        halted = False
        self._current = self._lexer.next_token()
        try:
            self._parse_program()
        except FatalSyntaxError as exc:
            halted = True
            logger.debug("recognition halted: %s", exc.diagnostic)

        self._result = ParseResult(
            diagnostics=tuple(self._diagnostics),
            halted=halted,
            source_file=self._source_file,
        )
        if self._result.ok:
            logger.info("%s: no syntax errors", self._source_file or "<source>")
        else:
            logger.info(
                "%s: %d syntax error(s)",
                self._source_file or "<source>",
                self._result.error_count,
            )
        return self._result
