"""Tests for line comments and nestable block comments."""

from minijava import tokenize
from minijava.tokens import TokenType


def kinds(source: str) -> list[TokenType]:
    return [t.type for t in tokenize(source)]


class TestLineComments:
    def test_comment_only(self) -> None:
        assert kinds("// nothing here") == [TokenType.EOF]

    def test_comment_emits_no_token(self) -> None:
        assert kinds("x // y z\nw") == [TokenType.ID, TokenType.ID, TokenType.EOF]

    def test_block_opener_inside_line_comment(self) -> None:
        assert kinds("// /* not a block\nx") == [TokenType.ID, TokenType.EOF]

    def test_consecutive_comments(self) -> None:
        assert kinds("// a\n// b\r// c\r\nx") == [TokenType.ID, TokenType.EOF]


class TestBlockComments:
    def test_simple(self) -> None:
        assert kinds("/* a */ x") == [TokenType.ID, TokenType.EOF]

    def test_nested_is_one_comment(self) -> None:
        assert kinds("/* a /* b */ c */") == [TokenType.EOF]

    def test_deep_nesting(self) -> None:
        assert kinds("/*/*/* */*/*/x") == [TokenType.ID, TokenType.EOF]

    def test_unmatched_closer(self) -> None:
        """The first ``*/`` closes the only open level."""
        tokens = tokenize("/* a */ b */")
        assert [(t.type, t.col) for t in tokens] == [
            (TokenType.ID, 9),
            (TokenType.TIMES, 11),
            (TokenType.UNKNOWN, 12),
            (TokenType.EOF, 13),
        ]

    def test_empty_comment(self) -> None:
        assert kinds("/**/x") == [TokenType.ID, TokenType.EOF]

    def test_stars_before_close(self) -> None:
        assert kinds("/* ***/x") == [TokenType.ID, TokenType.EOF]

    def test_line_comment_marker_inside_block(self) -> None:
        assert kinds("/* // */ x") == [TokenType.ID, TokenType.EOF]

    def test_many_comments_in_a_row(self) -> None:
        """Comment skipping loops rather than recursing."""
        source = "/* c */" * 5000 + "x"
        assert kinds(source) == [TokenType.ID, TokenType.EOF]


class TestUnterminatedComments:
    """An unclosed block comment silently runs to end of stream."""

    def test_unterminated(self) -> None:
        assert kinds("x /* never closed") == [TokenType.ID, TokenType.EOF]

    def test_unterminated_nested(self) -> None:
        assert kinds("/* a /* b */ still open") == [TokenType.EOF]

    def test_unterminated_eof_position(self) -> None:
        tokens = tokenize("/*\nab")
        assert (tokens[0].type, tokens[0].lineno, tokens[0].col) == (TokenType.EOF, 2, 3)

    def test_open_star_at_end(self) -> None:
        assert kinds("/*") == [TokenType.EOF]
