"""
Unit tests for report formatting.
"""

import pytest

from teeup.grouping.models import Participant
from teeup.grouping.display import (
    format_result,
    format_member,
    format_group_header,
    format_rating,
    format_draw_header,
    format_balance_line,
    format_comparison,
)


@pytest.fixture
def draw():
    partition = [
        [Participant(1, "Kim", 12), Participant(2, "Lee")],
        [Participant(3, "Park", 7.5), Participant(4, "Choi", 20.5)],
        [Participant(5, "Jung")],
    ]
    names = ["Eagle", "Birdie", "Group 3"]
    return partition, names


class TestFormatResult:
    """Tests for the shareable report."""

    def test_exact_layout(self, draw):
        partition, names = draw
        text = format_result(partition, names, 5)

        expected = (
            "=== TEE TIME GROUPS ===\n"
            "Participants: 5 | Groups: 3\n"
            "\n"
            "[Eagle] avg handicap 12.0\n"
            "Kim (12), Lee\n"
            "\n"
            "[Birdie] avg handicap 14.0\n"
            "Park (7.5), Choi (20.5)\n"
            "\n"
            "[Group 3]\n"
            "Jung\n"
            "\n"
        )
        assert text == expected

    def test_last_group_has_separator(self, draw):
        """Each group, the last one included, is followed by a blank line."""
        partition, names = draw
        lines = format_result(partition, names, 5).split("\n")
        assert lines[-3:] == ["Jung", "", ""]

    def test_idempotent(self, draw):
        partition, names = draw
        assert format_result(partition, names, 5) == format_result(partition, names, 5)

    def test_does_not_modify_inputs(self, draw):
        partition, names = draw
        before = [list(g) for g in partition], list(names)
        format_result(partition, names, 5)
        assert ([list(g) for g in partition], list(names)) == before

    def test_average_rounded_to_one_decimal(self):
        group = [Participant(1, "A", 1), Participant(2, "B", 2), Participant(3, "C", 2)]
        text = format_result([group], ["Fade"], 3)
        assert "[Fade] avg handicap 1.7" in text

    def test_empty_partition(self):
        text = format_result([], [], 0)
        assert text == "=== TEE TIME GROUPS ===\nParticipants: 0 | Groups: 0\n\n"

    def test_missing_names_raises(self, draw):
        partition, names = draw
        with pytest.raises(ValueError):
            format_result(partition, names[:2], 5)


class TestFormatHelpers:
    """Tests for smaller formatting helpers."""

    def test_format_rating(self):
        assert format_rating(12) == "12"
        assert format_rating(12.0) == "12"
        assert format_rating(7.5) == "7.5"
        assert format_rating(-2) == "-2"

    def test_format_rating_keeps_precision(self):
        """Long or large ratings are printed in full."""
        assert format_rating(12.3456789) == "12.3456789"
        assert format_rating(1234567) == "1234567"
        assert format_rating(0.1) == "0.1"

    def test_format_member(self):
        assert format_member(Participant(1, "Kim", 3)) == "Kim (3)"
        assert format_member(Participant(1, "Kim")) == "Kim"

    def test_format_group_header(self):
        assert format_group_header("Eagle", None) == "[Eagle]"
        assert format_group_header("Eagle", 9.25) == "[Eagle] avg handicap 9.2"

    def test_format_draw_header(self):
        text = format_draw_header(12, 4, "balanced", 7)
        assert "Players: 12" in text
        assert "Group size: 4" in text
        assert "Strategy: balanced" in text
        assert "Seed: 7" in text
        assert "Seed" not in format_draw_header(12, 4, "random", None)

    def test_format_balance_line(self):
        assert format_balance_line(None, None, 1) == "Balance: no rated groups, size spread 1"
        line = format_balance_line(1.5, 0.75, 0)
        assert "spread 1.50" in line
        assert "std 0.75" in line

    def test_format_comparison(self):
        text = format_comparison([("random", 3.25, 6.0), ("balanced", None, None)])
        lines = text.split("\n")
        assert lines[0].startswith("Strategy")
        assert "3.25" in lines[2]
        assert "-" in lines[3]
