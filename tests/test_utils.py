"""Tests for reference-string parsing and presentation helpers."""

import pytest

import config
from engine import simulate
from utils import frame_table, get_color, parse_reference_string


class TestParseReferenceString:
    """Verify free-form text is split into page identifiers."""

    @pytest.mark.parametrize("text, expected", [
        ("7 0 1 2", [7, 0, 1, 2]),
        ("7,0,1,2", [7, 0, 1, 2]),
        ("7, 0 1;2\n3", [7, 0, 1, 2, 3]),
        ("  1  ,, 2 ", [1, 2]),
        ("a b a", ["a", "b", "a"]),
        ("1 x 1.5", [1, "x", "1.5"]),
    ])
    def test_parses(self, text, expected) -> None:
        assert parse_reference_string(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", ",,", None])
    def test_blank_gives_empty(self, text) -> None:
        assert parse_reference_string(text) == []

    def test_feeds_simulator(self) -> None:
        result = simulate(parse_reference_string("7,0,1,2,0,3,0,4"), 3, "lru")
        assert result.total_faults == 6


class TestFrameTable:
    """Verify the frame-by-step grid."""

    def test_rows_per_frame(self) -> None:
        result = simulate([1, 2, 1, 3], 2, "fifo")
        assert frame_table(result) == [
            [1, 1, 1, 3],
            [None, 2, 2, 2],
        ]

    def test_empty_result(self) -> None:
        assert frame_table(simulate([], 3, "lru")) == [[], [], []]


class TestGetColor:
    """Verify colouring of steps and frames."""

    def test_no_step(self) -> None:
        assert get_color(None) == config.EMPTY_COLOR
        assert get_color(None, 0) == config.EMPTY_COLOR

    def test_step_outcome(self) -> None:
        steps = simulate([1, 1], 2, "fifo").steps
        assert get_color(steps[0]) == config.FAULT_COLOR
        assert get_color(steps[1]) == config.HIT_COLOR

    def test_frames_on_hit(self) -> None:
        step = simulate([1, 2, 2], 3, "fifo").steps[2]
        assert get_color(step, 0) == config.RESIDENT_COLOR
        assert get_color(step, 1) == config.HIT_COLOR
        assert get_color(step, 2) == config.EMPTY_COLOR

    def test_frames_on_fault(self) -> None:
        steps = simulate([1, 2, 3], 2, "fifo").steps
        assert get_color(steps[1], 0) == config.RESIDENT_COLOR
        assert get_color(steps[1], 1) == config.FAULT_COLOR
        assert get_color(steps[2], 0) == config.EVICT_COLOR
        assert get_color(steps[2], 1) == config.RESIDENT_COLOR
