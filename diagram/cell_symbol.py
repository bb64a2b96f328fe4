"""Classification of diagram characters into cell symbols.

Every character in the normalised grid has exactly one meaning:

    Stone       X O (plain), B W (circled), # @ (squared)
    EmptyMark   . (plain), , (hoshi), C (circle), S (square)
    MoveNumber  1..9, 0 (= move 10)
    Letter      a..z
    Border      the internal border marker
    Unknown     anything else (drawn as nothing)

Classification happens once when a Diagram is built, so consumers dispatch on
the symbol type instead of re-interpreting raw characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from diagram.constants import (
    BLACK_STONES,
    BORDER_MARKER,
    CIRCLE_MARKED,
    MAX_MOVE_NUMBER,
    SQUARE_MARKED,
    WHITE_STONES,
    other_color,
)

StoneColor = Literal["B", "W"]
MarkerKind = Literal["circle", "square"]
EmptyKind = Literal["plain", "hoshi", "circle", "square"]


@dataclass(frozen=True)
class Stone:
    color: StoneColor
    marker: MarkerKind | None = None


@dataclass(frozen=True)
class EmptyMark:
    kind: EmptyKind = "plain"


@dataclass(frozen=True)
class MoveNumber:
    number: int

    @property
    def label(self) -> str:
        return str(self.number)

    def color(self, first_color: StoneColor) -> StoneColor:
        """Odd moves belong to the first player, even moves to the other."""
        return first_color if self.number % 2 == 1 else other_color(first_color)


@dataclass(frozen=True)
class Letter:
    char: str


@dataclass(frozen=True)
class Border:
    pass


@dataclass(frozen=True)
class Unknown:
    char: str


CellSymbol = Union[Stone, EmptyMark, MoveNumber, Letter, Border, Unknown]

_EMPTY_KINDS: dict[str, EmptyKind] = {
    ".": "plain",
    ",": "hoshi",
    "C": "circle",
    "S": "square",
}


def _marker_for(char: str) -> MarkerKind | None:
    if char in CIRCLE_MARKED:
        return "circle"
    if char in SQUARE_MARKED:
        return "square"
    return None


def classify(char: str) -> CellSymbol:
    """Classify a single grid character.

    Args:
        char: One character of the normalised grid (may be empty for
            out-of-range probes)

    Returns:
        The CellSymbol describing what the character means
    """
    if len(char) != 1:
        return Unknown(char)
    if char in BLACK_STONES:
        return Stone("B", _marker_for(char))
    if char in WHITE_STONES:
        return Stone("W", _marker_for(char))
    if char in _EMPTY_KINDS:
        return EmptyMark(_EMPTY_KINDS[char])
    if "0" <= char <= "9":
        return MoveNumber(int(char) or MAX_MOVE_NUMBER)
    if "a" <= char <= "z":
        return Letter(char)
    if char == BORDER_MARKER:
        return Border()
    return Unknown(char)
