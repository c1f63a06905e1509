"""Exception classes for MiniJava.

Provides standardized exceptions for error handling throughout the front end.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minijava.diagnostics import Diagnostic


class MiniJavaError(Exception):
    """Base exception for all MiniJava front-end errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MiniJavaError):
    """Syntax error in a compilation unit.

    Raised when the recognizer rejects the token stream.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Source file name (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> ParseError:
        """Build an error positioned at the diagnostic's token."""
        token = diagnostic.token
        return cls(
            diagnostic.format(),
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.source_file,
        )


class FatalSyntaxError(ParseError):
    """Expected-token mismatch that halts recognition.

    Raised inside the parser at the point of the mismatch and caught by
    ``Parser.parse()``, which records it and stops consuming input.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        token = diagnostic.token
        super().__init__(
            diagnostic.format(),
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.source_file,
        )
