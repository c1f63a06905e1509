"""Tests for the top-level API: tokenize() and check()."""

import gc
import io

from minijava import ParseConfig, ParseResult, check, parse_config_context, tokenize
from minijava.tokens import TokenType

PROGRAM = "class A { public static void main(String[] a) { System.out.println(1+2*3); } }"


class TestTokenize:
    def test_returns_list_ending_in_eof(self) -> None:
        tokens = tokenize("x && !y")
        assert [t.type for t in tokens] == [
            TokenType.ID,
            TokenType.AND,
            TokenType.NOT,
            TokenType.ID,
            TokenType.EOF,
        ]

    def test_source_file_stamped_on_tokens(self) -> None:
        assert {t.source_file for t in tokenize("a b", source_file="X.java")} == {"X.java"}

    def test_idempotent_across_calls(self) -> None:
        first = tokenize(PROGRAM)
        second = tokenize(PROGRAM)
        assert all(a.same_as(b) for a, b in zip(first, second, strict=True))


class TestCheck:
    def test_clean_program(self) -> None:
        result = check(PROGRAM)
        assert isinstance(result, ParseResult)
        assert result.ok

    def test_accepts_bytes_and_streams(self) -> None:
        assert check(PROGRAM.encode()).ok
        assert check(io.StringIO(PROGRAM)).ok
        assert check(io.BytesIO(PROGRAM.encode())).ok

    def test_invalid_utf8_reported_not_raised(self) -> None:
        result = check(b"class A { \xff }")
        assert result.halted
        assert result.messages() == ["ERROR: UNKNOWN at line 1, column 11; Expected PUBLIC"]

    def test_caller_stream_stays_open(self) -> None:
        stream = io.BytesIO(b"class A")
        check(stream)
        gc.collect()
        assert not stream.closed
        assert stream.read() == b""

    def test_trace_tokens_flag(self, capsys) -> None:
        check(PROGRAM, trace_tokens=True)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "CLASS at 1:1"
        assert lines[-1] == "EOF at 1:79"

    def test_trace_off_by_default(self, capsys) -> None:
        check(PROGRAM)
        assert capsys.readouterr().out == ""

    def test_keeps_active_tab_width(self) -> None:
        with parse_config_context(ParseConfig(tab_width=2)):
            result = check("\tclass", trace_tokens=True)
        assert result.diagnostics[0].token.col == 8
