"""SGF (Smart Game Format) export of a diagram.

The playable area is placed on a square SGF board. When only one pair of
opposite edges is framed, that pair fixes the board size and the diagram must
fit inside it; otherwise the configured board size is used. Boards whose
framed edges imply a non-square shape cannot be exported.

Format reference: https://www.red-bean.com/sgf/
"""

from __future__ import annotations

import datetime
import re

from diagram.cell_symbol import EmptyMark, Letter, MoveNumber, Stone
from diagram.constants import APP_NAME, APP_VERSION, MAX_MOVE_NUMBER
from diagram.errors import ExportUnsupported
from diagram.go_diagram import Diagram

_SGF_POINT_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# "3 at 1" in a title means move 3 was played where move 1 is shown
_MOVE_HINT_RE = re.compile(r"(\d|10) at (\d)")


class SGFFormatter:
    """Converts a Diagram to an SGF game record."""

    @staticmethod
    def escape_text(text: str) -> str:
        """Escape a value for an SGF text property."""
        return text.replace("\\", "\\\\").replace("]", "\\]")

    @staticmethod
    def point(x: int, y: int) -> str:
        """Convert 0-based board coordinates to an SGF point (e.g. (2, 3) -> "cd")."""
        return _SGF_POINT_CHARS[x] + _SGF_POINT_CHARS[y]

    @staticmethod
    def board_placement(diagram: Diagram) -> tuple[int, int, int]:
        """Compute the SGF board size and where the diagram sits on it.

        Returns:
            Tuple of (size, offset_x, offset_y)

        Raises:
            ExportUnsupported: If the framed edges conflict with a square board
        """
        b = diagram.bounds
        size_x = b.cols
        size_y = b.rows
        offset_x = 0
        offset_y = 0

        if b.height_defined:
            if b.width_defined and size_x != size_y:
                raise ExportUnsupported(f"Framed board is not square ({size_x}x{size_y})")
            if size_x > size_y:
                raise ExportUnsupported(
                    f"Diagram is wider ({size_x}) than the framed board height ({size_y})"
                )
            size = size_y
            if b.right_border:
                offset_x = size - size_x
            elif not b.left_border:
                offset_x = (size - size_x) // 2
        elif b.width_defined:
            if size_y > size_x:
                raise ExportUnsupported(
                    f"Diagram is taller ({size_y}) than the framed board width ({size_x})"
                )
            size = size_x
            if b.bottom_border:
                offset_y = size - size_y
            elif not b.top_border:
                offset_y = (size - size_y) // 2
        else:
            size = max(size_x, size_y, diagram.board_size)
            if b.right_border:
                offset_x = size - size_x
            elif not b.left_border:
                offset_x = (size - size_x) // 2
            if b.bottom_border:
                offset_y = size - size_y
            elif not b.top_border:
                offset_y = (size - size_y) // 2

        if size > len(_SGF_POINT_CHARS):
            raise ExportUnsupported(f"Board size {size} exceeds the SGF maximum of 52")
        return size, offset_x, offset_y

    @staticmethod
    def diagram_to_sgf(diagram: Diagram, date: datetime.date | None = None) -> str:
        """Convert a diagram to an SGF string.

        Stones become setup properties (AB/AW), markers become CR/SQ/LB
        markup, and numbered stones become a move sequence (moves 1-10)
        followed by a node repeating the markup.

        Args:
            diagram: Diagram to export
            date: Date for the DT property (default: today)

        Returns:
            str: SGF game record

        Raises:
            ExportUnsupported: If the board shape cannot be exported
        """
        size, offset_x, offset_y = SGFFormatter.board_placement(diagram)
        date = date or datetime.date.today()

        first = diagram.first_color
        b = diagram.bounds

        black: list[str] = []
        white: list[str] = []
        circles: list[str] = []
        squares: list[str] = []
        labels: list[str] = []
        moves: dict[int, tuple[str, str]] = {}  # number -> (color, point)

        for row, col, _ in diagram.playable_cells():
            pos = SGFFormatter.point(col - b.start_col + offset_x, row - b.start_row + offset_y)
            symbol = diagram.symbol_at(row, col)

            if isinstance(symbol, Stone):
                (black if symbol.color == "B" else white).append(pos)
                if symbol.marker == "circle":
                    circles.append(pos)
                elif symbol.marker == "square":
                    squares.append(pos)
            elif isinstance(symbol, EmptyMark):
                if symbol.kind == "circle":
                    circles.append(pos)
                elif symbol.kind == "square":
                    squares.append(pos)
            elif isinstance(symbol, MoveNumber):
                moves[symbol.number] = (symbol.color(first), pos)
            elif isinstance(symbol, Letter):
                labels.append(f"{pos}:{symbol.char}")

        for hint in _MOVE_HINT_RE.finditer(diagram.title):
            number = int(hint.group(1))
            referred = int(hint.group(2))
            if 1 <= number <= MAX_MOVE_NUMBER and number not in moves and referred in moves:
                color = MoveNumber(number).color(first)
                moves[number] = (color, moves[referred][1])

        sgf = (
            f"(;GM[1]FF[4]SZ[{size}]\n\n"
            f"GN[{SGFFormatter.escape_text(diagram.title)}]\n"
            f"AP[{APP_NAME}:{APP_VERSION}]\n"
            f"DT[{date.isoformat()}]\n"
            f"PL[{first}]\n"
        )

        if black:
            sgf += "AB[" + "][".join(black) + "]\n"
        if white:
            sgf += "AW[" + "][".join(white) + "]\n"

        markup = ""
        if circles:
            markup += "CR[" + "][".join(circles) + "]\n"
        if squares:
            markup += "SQ[" + "][".join(squares) + "]\n"
        if labels:
            markup += "LB[" + "][".join(labels) + "]\n"
        sgf += markup + "\n"

        for number in range(1, MAX_MOVE_NUMBER + 1):
            if number in moves:
                color, pos = moves[number]
                sgf += f";{color}[{pos}]C[{color}{number}]\n"

        # repeat markup after the moves so it shows on the final position
        if moves:
            sgf += ";" + markup
        sgf += ")\n"

        return sgf
