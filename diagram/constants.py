"""Notation constants shared by the parser, renderer and exporters.

Character classes follow the Sensei's Library diagram syntax
(https://senseis.xmp.net/?HowDiagramsWork).
"""

# Internal sentinel for any of the frame characters "-", "|" and "+"
BORDER_MARKER = "%"
BORDER_CHARS = "-|+"

# Appended to every normalised row
ROW_SENTINEL = " "

APP_NAME = "sltxt2img"
APP_VERSION = "0.1.0"

DEFAULT_BOARD_SIZE = 19
DEFAULT_FIRST_COLOR = "B"

# Stone classes: plain, circled, squared
BLACK_STONES = "XB#"
WHITE_STONES = "OW@"
CIRCLE_MARKED = "BWC"
SQUARE_MARKED = "#@S"

# Characters allowed as link anchors
ANCHOR_PATTERN = r"^[a-z0-9WB@#CS]$"

# Column lettering skips "I" (and "i")
COORDINATE_CHARS = "ABCDEFGHJKLMNOPQRSTUVWXYZabcdefghjklmnopqrstuvwxyz123456789"

# Move "0" is move ten
MAX_MOVE_NUMBER = 10


def other_color(color: str) -> str:
    """Return the opposing stone color ("B" <-> "W")."""
    return "W" if color == "B" else "B"
