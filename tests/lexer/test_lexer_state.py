"""Tests for the lexer's lookahead buffer and end-of-stream state."""

from __future__ import annotations

import io

from minijava.config import ParseConfig, parse_config_context
from minijava.lexer import Lexer
from minijava.tokens import TokenType


class CountingStream(io.StringIO):
    """StringIO that counts read() calls."""

    def __init__(self, text: str) -> None:
        super().__init__(text, newline="")
        self.reads = 0

    def read(self, size: int | None = -1) -> str:
        self.reads += 1
        return super().read(size)


class TestPeek:
    """peek() fills a single pending slot that next_token() drains."""

    def test_peek_is_idempotent(self) -> None:
        lexer = Lexer("foo bar")
        first = lexer.peek()
        second = lexer.peek()
        assert first is second
        assert (first.type, first.lineno, first.col, first.value) == (TokenType.ID, 1, 1, "foo")

    def test_next_returns_peeked_token(self) -> None:
        lexer = Lexer("foo bar")
        peeked = lexer.peek()
        assert lexer.next_token() is peeked
        following = lexer.next_token()
        assert following.value == "bar"
        assert following is not peeked

    def test_next_after_peek_does_not_rescan(self) -> None:
        stream = CountingStream("alpha beta")
        lexer = Lexer(stream)
        lexer.peek()
        reads = stream.reads
        lexer.next_token()
        assert stream.reads == reads

    def test_pending_cleared_after_next(self) -> None:
        lexer = Lexer("a b")
        lexer.peek()
        lexer.next_token()
        assert lexer._pending is None

    def test_peek_then_next_matches_plain_stream(self) -> None:
        source = "class A { int[] x; } // done"
        plain = list(Lexer(source).tokenize())

        lexer = Lexer(source)
        mixed = []
        while True:
            lexer.peek()
            token = lexer.next_token()
            mixed.append(token)
            if token.type is TokenType.EOF:
                break
        assert len(mixed) == len(plain)
        assert all(a.same_as(b) for a, b in zip(mixed, plain))


class TestEndOfStream:
    """EOF is permanent."""

    def test_eof_repeats(self) -> None:
        lexer = Lexer("x")
        lexer.next_token()
        eofs = [lexer.next_token() for _ in range(3)]
        assert all(t.type is TokenType.EOF for t in eofs)
        assert {(t.lineno, t.col) for t in eofs} == {(1, 2)}

    def test_peek_at_eof(self) -> None:
        lexer = Lexer("")
        assert lexer.peek().type is TokenType.EOF
        assert lexer.next_token().type is TokenType.EOF
        assert lexer.peek().type is TokenType.EOF

    def test_tokenize_stops_at_first_eof(self) -> None:
        tokens = list(Lexer("a").tokenize())
        assert [t.type for t in tokens] == [TokenType.ID, TokenType.EOF]

    def test_current_char_empty_after_exhaustion(self) -> None:
        lexer = Lexer("ab")
        list(lexer.tokenize())
        assert lexer._char == ""


class TestTracing:
    """Produced tokens are written to the trace sink exactly once."""

    def test_trace_sink(self) -> None:
        sink = io.StringIO()
        list(Lexer("x 42", trace=sink).tokenize())
        assert sink.getvalue() == "ID(x) at 1:1\nNUM(42) at 1:3\nEOF at 1:5\n"

    def test_peek_traces_once(self) -> None:
        sink = io.StringIO()
        lexer = Lexer("x", trace=sink)
        lexer.peek()
        lexer.peek()
        lexer.next_token()
        assert sink.getvalue() == "ID(x) at 1:1\n"

    def test_no_trace_by_default(self, capsys) -> None:
        list(Lexer("x").tokenize())
        assert capsys.readouterr().out == ""

    def test_config_enables_stdout_trace(self, capsys) -> None:
        with parse_config_context(ParseConfig(trace_tokens=True)):
            list(Lexer("{ }").tokenize())
        assert capsys.readouterr().out.splitlines() == [
            "LBRACE at 1:1",
            "RBRACE at 1:3",
            "EOF at 1:4",
        ]

    def test_trace_does_not_change_tokens(self) -> None:
        source = "if (a < b) x = 1; else y = 2;"
        traced = list(Lexer(source, trace=io.StringIO()).tokenize())
        plain = list(Lexer(source).tokenize())
        assert all(a.same_as(b) for a, b in zip(traced, plain, strict=True))


class TestSourceFile:
    def test_source_file_exposed_and_stamped(self) -> None:
        lexer = Lexer("x", "A.java")
        assert lexer.source_file == "A.java"
        assert lexer.next_token().source_file == "A.java"

    def test_source_file_defaults_to_none(self) -> None:
        assert Lexer("x").source_file is None
