"""Tests for character classification."""

import pytest

from diagram.cell_symbol import (
    Border,
    EmptyMark,
    Letter,
    MoveNumber,
    Stone,
    Unknown,
    classify,
)


class TestClassify:
    @pytest.mark.parametrize(
        "char,expected",
        [
            ("X", Stone("B")),
            ("O", Stone("W")),
            ("B", Stone("B", "circle")),
            ("W", Stone("W", "circle")),
            ("#", Stone("B", "square")),
            ("@", Stone("W", "square")),
            (".", EmptyMark("plain")),
            (",", EmptyMark("hoshi")),
            ("C", EmptyMark("circle")),
            ("S", EmptyMark("square")),
            ("1", MoveNumber(1)),
            ("9", MoveNumber(9)),
            ("0", MoveNumber(10)),
            ("a", Letter("a")),
            ("z", Letter("z")),
            ("%", Border()),
            ("?", Unknown("?")),
            ("A", Unknown("A")),
            (" ", Unknown(" ")),
        ],
    )
    def test_single_characters(self, char, expected):
        assert classify(char) == expected

    def test_empty_string_is_unknown(self):
        assert classify("") == Unknown("")

    def test_multi_character_string_is_unknown(self):
        assert classify("XO") == Unknown("XO")


class TestMoveNumber:
    def test_label(self):
        assert MoveNumber(3).label == "3"
        assert MoveNumber(10).label == "10"

    @pytest.mark.parametrize("number", range(1, 11))
    def test_parity(self, number):
        expected_black_first = "B" if number % 2 == 1 else "W"
        expected_white_first = "W" if number % 2 == 1 else "B"
        assert MoveNumber(number).color("B") == expected_black_first
        assert MoveNumber(number).color("W") == expected_white_first
