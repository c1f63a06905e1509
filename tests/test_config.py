"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and that the lexer
picks up the active configuration.
"""

from threading import Thread

import pytest

from minijava import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    tokenize,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.trace_tokens is False
        assert config.tab_width == 4

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.trace_tokens = True  # type: ignore[misc]

    def test_rejects_non_positive_tab_width(self) -> None:
        with pytest.raises(ValueError, match="tab_width"):
            ParseConfig(tab_width=0)


class TestContextVarFunctions:
    def test_default_config(self) -> None:
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(tab_width=2))
        try:
            assert get_parse_config().tab_width == 2
        finally:
            reset_parse_config()
        assert get_parse_config().tab_width == 4

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(trace_tokens=True)):
                assert get_parse_config().trace_tokens
                raise RuntimeError("boom")
        assert get_parse_config().trace_tokens is False

    def test_nested_contexts(self) -> None:
        with parse_config_context(ParseConfig(tab_width=2)):
            with parse_config_context(ParseConfig(tab_width=3)):
                assert get_parse_config().tab_width == 3
            assert get_parse_config().tab_width == 2


class TestLexerReadsConfig:
    def test_tab_width_applies_inside_context(self) -> None:
        with parse_config_context(ParseConfig(tab_width=2)):
            inside = tokenize("\tx")[0]
        outside = tokenize("\tx")[0]
        assert inside.col == 3
        assert outside.col == 5


class TestThreadIsolation:
    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, int] = {}

        def worker(name: str, width: int) -> None:
            with parse_config_context(ParseConfig(tab_width=width)):
                results[name] = tokenize("\tx")[0].col

        threads = [Thread(target=worker, args=(f"t{w}", w)) for w in (1, 2, 8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == {"t1": 2, "t2": 3, "t8": 9}
        assert get_parse_config().tab_width == 4
