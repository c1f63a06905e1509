"""Pull-based lexer with one token of lookahead.

Characters are pulled from the source one at a time and tokens are
produced on demand. The parser drives the lexer through ``next_token()``
and ``peek()``; nothing is buffered beyond the current character and a
single pending token.

Thread Safety:
Lexer instances are single-use. Create one per compilation unit.
All state is instance-local; the lookup tables are read-only.

"""

from __future__ import annotations

import codecs
import io
import sys
from collections.abc import Iterator, Mapping
from typing import IO

from minijava.config import get_parse_config
from minijava.lexer.charsets import DIGITS, LETTERS, WHITESPACE
from minijava.lexer.scanners import (
    CommentScannerMixin,
    SymbolScannerMixin,
    WordScannerMixin,
)
from minijava.tokens import KEYWORDS, PUNCTUATION, Token, TokenType
from minijava.utils.logger import get_logger

logger = get_logger(__name__)

Source = str | bytes | bytearray | IO[str] | IO[bytes]


class ByteCharReader:
    """Text view of a binary stream, decoded as UTF-8 one character at a time.

    Undecodable bytes come out as U+FFFD, which the lexer classifies as
    UNKNOWN. The wrapped stream is borrowed: it is never closed or detached.
    """

    __slots__ = ("_stream", "_decoder", "_buffer")

    def __init__(self, stream: IO[bytes], prefix: bytes = b"") -> None:
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = self._decoder.decode(prefix)

    def read(self, size: int = 1) -> str:
        """Return up to ``size`` characters; "" once the stream is exhausted."""
        while len(self._buffer) < size:
            data = self._stream.read(1)
            if not data:
                self._buffer += self._decoder.decode(b"", final=True)
                break
            self._buffer += self._decoder.decode(data)
        chars, self._buffer = self._buffer[:size], self._buffer[size:]
        return chars


def open_source(source: Source) -> IO[str]:
    """Wrap a supported source in a text stream that preserves line endings.

    Binary streams are read through a ``ByteCharReader`` so the caller keeps
    ownership of them. Invalid UTF-8 is replaced, never raised.

    Args:
        source: Program text, UTF-8 bytes, or a readable text/binary stream

    Returns:
        Text stream read one character at a time by the lexer.

    Raises:
        TypeError: If the source is not readable text or bytes.
    """
    if isinstance(source, str):
        return io.StringIO(source, newline="")
    if isinstance(source, (bytes, bytearray)):
        return io.StringIO(bytes(source).decode("utf-8", errors="replace"), newline="")
    if isinstance(source, io.TextIOBase):
        return source
    if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
        return ByteCharReader(source)  # type: ignore[return-value]
    if hasattr(source, "read"):
        return source  # type: ignore[return-value]
    raise TypeError(f"cannot read program text from {type(source).__name__}")


class Lexer(
    WordScannerMixin,
    CommentScannerMixin,
    SymbolScannerMixin,
):
    """Pull-based lexer for MiniJava.

    Each scan:
    1. Return EOF if the source is exhausted (EOF is permanent)
    2. Skip whitespace
    3. Dispatch on the first character: letter, digit, ``/``, symbol
    4. If a comment was skipped, loop back to 1

    Usage:
            >>> lexer = Lexer("int[] a;")
            >>> [str(t) for t in lexer.tokenize()]
            ['INT at 1:1', 'LBRACK at 1:4', 'RBRACK at 1:5', 'ID(a) at 1:7',
             'SEMI at 1:8', 'EOF at 1:9']

    Thread Safety:
        Lexer instances are single-use. Create one per compilation unit.

    """

    __slots__ = (
        "_stream",
        "_char",  # Current unread character; "" at end of stream
        "_lineno",
        "_col",
        "_pending",  # Token scanned by peek() and not yet consumed
        "_source_file",
        "_keywords",
        "_punctuation",
        "_tab_width",
        "_trace",
    )

    def __init__(
        self,
        source: Source,
        source_file: str | None = None,
        *,
        keywords: Mapping[str, TokenType] = KEYWORDS,
        punctuation: Mapping[str, TokenType] = PUNCTUATION,
        trace: IO[str] | None = None,
    ) -> None:
        """Initialize lexer with a program source.

        Args:
            source: Program text, UTF-8 bytes, or a readable stream
            source_file: Optional source name for diagnostics
            keywords: Reserved word table
            punctuation: Punctuation table
            trace: Sink for token tracing. Defaults to standard output
                when the active config enables ``trace_tokens``.
        """
        config = get_parse_config()
        self._stream = open_source(source)
        self._source_file = source_file
        self._keywords = keywords
        self._punctuation = punctuation
        self._tab_width = config.tab_width
        if trace is None and config.trace_tokens:
            trace = sys.stdout
        self._trace = trace

        self._lineno = 1
        self._col = 1
        self._pending: Token | None = None
        char = self._stream.read(1)
        if isinstance(char, (bytes, bytearray)):
            # Binary reader outside the io hierarchy
            self._stream = ByteCharReader(self._stream, bytes(char))  # type: ignore[arg-type]
            char = self._stream.read(1)
        self._char = char

    @property
    def source_file(self) -> str | None:
        """Source name stamped on every token, or None."""
        return self._source_file

    def next_token(self) -> Token:
        """Return the next token and consume it.

        A token previously returned by ``peek()`` is handed out without
        rescanning the source.
        """
        token = self._pending
        if token is not None:
            self._pending = None
            return token
        return self._emit(self._scan())

    def peek(self) -> Token:
        """Return the next token without consuming it.

        Repeated calls return the same token object until ``next_token()``.
        """
        if self._pending is None:
            self._pending = self._emit(self._scan())
        return self._pending

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _advance_char(self) -> str:
        """Consume the current character, updating line/column tracking.

        ``\\n``, ``\\r`` and ``\\r\\n`` each count as exactly one line break.

        Returns:
            The consumed character, or "" at end of stream.
        """
        char = self._char
        if not char:
            return char

        next_char = self._stream.read(1)
        if char == "\n":
            self._lineno += 1
            self._col = 1
        elif char == "\r":
            self._lineno += 1
            self._col = 1
            if next_char == "\n":
                next_char = self._stream.read(1)
        elif char == "\t":
            self._col += self._tab_width
        else:
            self._col += 1
        self._char = next_char
        return char

    # =========================================================================
    # Scanning
    # =========================================================================

    def _scan(self) -> Token:
        """Scan one real token, discarding whitespace and comments."""
        while True:
            while self._char in WHITESPACE:
                self._advance_char()
            if not self._char:
                return self._make_token(TokenType.EOF, self._lineno, self._col)

            lineno, col = self._lineno, self._col
            char = self._char
            if char in LETTERS:
                return self._scan_word(lineno, col)
            if char in DIGITS:
                return self._scan_number(lineno, col)
            if char == "/":
                token = self._scan_slash(lineno, col)
                if token is not None:
                    return token
                continue
            return self._scan_symbol(lineno, col)

    def _make_token(
        self, token_type: TokenType, lineno: int, col: int, value: str | None = None
    ) -> Token:
        """Create a Token stamped with the source file name."""
        return Token(token_type, lineno, col, value, self._source_file)

    def _emit(self, token: Token) -> Token:
        """Trace a freshly scanned token."""
        logger.debug("token %s", token)
        if self._trace is not None:
            self._trace.write(f"{token}\n")
        return token
