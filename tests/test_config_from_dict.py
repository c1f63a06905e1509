"""Tests for ParseConfig.from_dict()."""

from minijava import ParseConfig


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()

    def test_known_keys(self) -> None:
        config = ParseConfig.from_dict({"trace_tokens": True, "tab_width": 8})
        assert config.trace_tokens is True
        assert config.tab_width == 8

    def test_unknown_keys_ignored(self) -> None:
        config = ParseConfig.from_dict({"trace_tokens": True, "color": "auto"})
        assert config == ParseConfig(trace_tokens=True)
