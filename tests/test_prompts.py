"""Tests for ui/prompts.py."""

from __future__ import annotations

import pytest

from trashtool.fs.protocol import Confirmer, Selector
from trashtool.ui.listing import make_console
from trashtool.ui.prompts import PromptConfirmer, PromptSelector, parse_selection


class TestParseSelection:
    @pytest.mark.parametrize(
        ("text", "count", "expected"),
        [
            pytest.param("1", 3, [0], id="single"),
            pytest.param("1 3", 3, [0, 2], id="spaces"),
            pytest.param("3,1", 3, [2, 0], id="commas-keep-order"),
            pytest.param("2-4", 5, [1, 2, 3], id="range"),
            pytest.param("5, 1-2", 5, [4, 0, 1], id="mixed"),
            pytest.param("2 2 1-2", 3, [1, 0], id="duplicates"),
            pytest.param("  ", 3, [], id="blank"),
        ],
    )
    def test_valid(self, text: str, count: int, expected: list[int]):
        assert parse_selection(text, count) == expected

    @pytest.mark.parametrize(
        ("text", "count"),
        [
            pytest.param("0", 3, id="zero"),
            pytest.param("4", 3, id="too-high"),
            pytest.param("3-1", 3, id="reversed-range"),
            pytest.param("1-9", 3, id="range-too-high"),
            pytest.param("abc", 3, id="word"),
            pytest.param("-1", 3, id="negative"),
        ],
    )
    def test_invalid(self, text: str, count: int):
        with pytest.raises(ValueError):
            parse_selection(text, count)


class TestProtocols:
    def test_prompt_selector_is_selector(self):
        assert isinstance(PromptSelector(make_console("never")), Selector)

    def test_prompt_confirmer_is_confirmer(self):
        assert isinstance(PromptConfirmer(), Confirmer)
