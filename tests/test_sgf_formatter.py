"""Tests for SGF export."""

import datetime

import pytest

from diagram import ExportUnsupported, parse_diagram_string
from diagram.formatters import SGFFormatter

DATE = datetime.date(2024, 1, 2)


def sgf_for(text):
    return SGFFormatter.diagram_to_sgf(parse_diagram_string(text), date=DATE)


class TestSGFHelpers:
    @pytest.mark.parametrize(
        "x,y,expected",
        [(0, 0, "aa"), (2, 3, "cd"), (18, 18, "ss"), (25, 26, "zA"), (51, 0, "Za")],
    )
    def test_point(self, x, y, expected):
        assert SGFFormatter.point(x, y) == expected

    def test_escape_text(self):
        assert SGFFormatter.escape_text("a]b\\c") == "a\\]b\\\\c"


class TestBoardPlacement:
    def test_full_frame(self):
        diagram = parse_diagram_string("$$\n$$+-----+\n$$|. . .|\n$$|. . .|\n$$|. . .|\n$$+-----+")
        assert SGFFormatter.board_placement(diagram) == (3, 0, 0)

    def test_height_defined_wider_board_fails(self):
        diagram = parse_diagram_string("$$\n$$-----\n$$. . .\n$$-----")
        with pytest.raises(ExportUnsupported):
            SGFFormatter.board_placement(diagram)

    def test_non_square_frame_fails(self):
        diagram = parse_diagram_string("$$\n$$+---+\n$$|. .|\n$$+---+")
        with pytest.raises(ExportUnsupported, match="not square"):
            SGFFormatter.board_placement(diagram)

    def test_height_defined_right_edge(self):
        diagram = parse_diagram_string("$$\n$$----+\n$$. . |\n$$. . |\n$$. . |\n$$----+")
        assert SGFFormatter.board_placement(diagram) == (3, 1, 0)

    def test_height_defined_centred(self):
        diagram = parse_diagram_string("$$\n$$---\n$$ .\n$$ .\n$$ .\n$$---")
        assert SGFFormatter.board_placement(diagram) == (3, 1, 0)

    def test_width_defined_bottom_edge(self):
        diagram = parse_diagram_string("$$\n$$|. . .|\n$$+-----+")
        assert SGFFormatter.board_placement(diagram) == (3, 0, 2)

    def test_width_defined_taller_board_fails(self):
        diagram = parse_diagram_string("$$\n$$|.|\n$$|.|")
        with pytest.raises(ExportUnsupported):
            SGFFormatter.board_placement(diagram)

    def test_no_frame_uses_board_size(self):
        diagram = parse_diagram_string("$$c13\n$$ . X")
        assert SGFFormatter.board_placement(diagram) == (13, 5, 6)

    def test_corner_no_frame_on_opposite_sides(self):
        diagram = parse_diagram_string("$$\n$$ . . |\n$$ ----+")
        assert SGFFormatter.board_placement(diagram) == (19, 17, 18)


class TestDiagramToSGF:
    def test_full_record(self):
        sgf = sgf_for("$$B test\n$$+-----+\n$$|X O .|\n$$|. 1 2|\n$$|B a .|\n$$+-----+")

        assert sgf == (
            "(;GM[1]FF[4]SZ[3]\n\n"
            "GN[test]\n"
            "AP[sltxt2img:0.1.0]\n"
            "DT[2024-01-02]\n"
            "PL[B]\n"
            "AB[aa][ac]\n"
            "AW[ba]\n"
            "CR[ac]\n"
            "LB[bc:a]\n"
            "\n"
            ";B[bb]C[B1]\n"
            ";W[cb]C[W2]\n"
            ";CR[ac]\n"
            "LB[bc:a]\n"
            ")\n"
        )

    def test_no_moves_has_no_markup_node(self):
        sgf = sgf_for("$$W\n$$+---+\n$$|X S|\n$$|# .|\n$$+---+")

        assert "PL[W]\n" in sgf
        assert "AB[aa][ab]\n" in sgf
        assert "SQ[ba][ab]\n" in sgf
        assert sgf.endswith("SQ[ba][ab]\n\n)\n")

    def test_white_first_moves(self):
        sgf = sgf_for("$$W\n$$+---+\n$$|1 2|\n$$|. .|\n$$+---+")
        assert ";W[aa]C[W1]\n;B[ba]C[B2]\n" in sgf

    def test_moves_are_in_numeric_order(self):
        sgf = sgf_for("$$\n$$+---+\n$$|0 2|\n$$|1 .|\n$$+---+")
        assert sgf.index("C[B1]") < sgf.index("C[W2]") < sgf.index("C[W10]")

    def test_title_move_hint(self):
        sgf = sgf_for("$$B 3 at 1\n$$+---+\n$$|1 2|\n$$|. .|\n$$+---+")
        assert ";B[aa]C[B1]\n;W[ba]C[W2]\n;B[aa]C[B3]\n" in sgf

    def test_title_hint_ignored_when_move_shown(self):
        sgf = sgf_for("$$B 2 at 1\n$$+---+\n$$|1 2|\n$$|. .|\n$$+---+")
        assert sgf.count("C[W2]") == 1
        assert ";W[ba]C[W2]" in sgf

    def test_title_is_escaped(self):
        sgf = sgf_for("$$ [sic]\n$$ X")
        assert "GN[[sic\\]]\n" in sgf

    def test_offsets_apply_to_points(self):
        sgf = sgf_for("$$\n$$ . X")
        assert "SZ[19]" in sgf
        assert "AB[jj]\n" in sgf

    def test_unsupported_board(self):
        diagram = parse_diagram_string("$$\n$$-----\n$$. . .\n$$-----")
        with pytest.raises(ExportUnsupported):
            SGFFormatter.diagram_to_sgf(diagram)

    def test_default_date_is_today(self):
        sgf = SGFFormatter.diagram_to_sgf(parse_diagram_string("$$\n$$ X"))
        assert f"DT[{datetime.date.today().isoformat()}]" in sgf
