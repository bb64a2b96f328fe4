"""Tests for grid normalisation, border detection and geometry."""

import pytest

from diagram.constants import BORDER_MARKER
from diagram.layout import (
    BoundingBox,
    char_at,
    coordinates_possible,
    derive_geometry,
    detect_bounds,
    normalize_rows,
    to_grid,
)
from shared.render_config import GlyphSize


class TestNormalizeRows:
    def test_border_characters_become_marker(self):
        assert normalize_rows("+--+\n|. .|\n") == ["%%%% ", "%..% "]

    def test_whitespace_and_dollars_are_removed(self):
        assert normalize_rows("X\t O $ .\r\n") == ["XO. "]

    def test_blank_lines_collapse(self):
        assert normalize_rows("X\n\n\nO\n") == ["X ", "O "]

    def test_empty_body(self):
        assert normalize_rows("") == [" "]


class TestDetectBounds:
    def test_full_frame(self):
        bounds = detect_bounds(normalize_rows("+--+\n|. .|\n+--+\n"))
        assert bounds == BoundingBox(1, 1, 1, 2, True, True, True, True)

    def test_no_frame(self):
        bounds = detect_bounds(normalize_rows(". X\nO .\n"))
        assert bounds == BoundingBox(0, 0, 1, 1)

    def test_top_left_corner(self):
        bounds = detect_bounds(normalize_rows("+----\n| . .\n| . .\n"))
        assert bounds.top_border and bounds.left_border
        assert not bounds.bottom_border and not bounds.right_border
        assert (bounds.start_row, bounds.start_col, bounds.end_row, bounds.end_col) == (1, 1, 2, 2)

    def test_right_edge_only(self):
        bounds = detect_bounds(normalize_rows(". . |\n. . |\n"))
        assert bounds.right_border
        assert not bounds.left_border
        assert (bounds.start_col, bounds.end_col) == (0, 1)

    def test_flags_depend_only_on_probe_cells(self):
        # frame characters away from the probe cells do not count
        bounds = detect_bounds(normalize_rows(". . .\n. | .\n. . .\n"))
        assert bounds == BoundingBox(0, 0, 2, 2)

    @pytest.mark.parametrize(
        "body",
        [
            "+--+\n|. .|\n+--+\n",
            "+----\n| . .\n| . .\n",
            ". . |\n. . |\n------\n",
            "X O .\n. , .\n",
        ],
    )
    def test_renormalising_gives_same_bounds(self, body):
        rows = normalize_rows(body)
        again = normalize_rows("\n".join(row.replace(BORDER_MARKER, "+") for row in rows))
        assert detect_bounds(again) == detect_bounds(rows)

    def test_empty_grid_is_invalid(self):
        bounds = detect_bounds(normalize_rows(""))
        assert bounds.end_col == -1
        assert not bounds.is_valid()

    def test_frame_only_is_invalid(self):
        bounds = detect_bounds(normalize_rows("+--+\n+--+\n"))
        assert bounds.start_row > bounds.end_row
        assert not bounds.is_valid()

    def test_defined_dimensions(self):
        bounds = BoundingBox(1, 0, 3, 4, top_border=True, bottom_border=True, left_border=True)
        assert bounds.height_defined
        assert not bounds.width_defined
        assert bounds.rows == 3
        assert bounds.cols == 5


class TestCoordinatesPossible:
    @pytest.mark.parametrize(
        "top,bottom,left,right,expected",
        [
            (True, False, True, False, True),
            (False, True, False, True, True),
            (True, True, False, False, False),
            (False, False, True, True, False),
            (False, False, False, False, False),
        ],
    )
    def test_needs_one_edge_per_axis(self, top, bottom, left, right, expected):
        bounds = BoundingBox(0, 0, 1, 1, top, bottom, left, right)
        assert coordinates_possible(bounds) is expected


class TestDeriveGeometry:
    def test_default_glyph(self):
        bounds = BoundingBox(1, 1, 1, 2, True, True, True, True)
        g = derive_geometry(bounds, GlyphSize(), coordinates=False)

        assert g.cell_diameter == 17
        assert g.radius == 8.5
        assert (g.image_width, g.image_height) == (38, 21)
        assert (g.offset_x, g.offset_y) == (2, 2)

    def test_coordinate_margins(self):
        bounds = BoundingBox(1, 1, 2, 3, True, True, True, True)
        g = derive_geometry(bounds, GlyphSize(), coordinates=True)

        assert (g.image_width, g.image_height) == (17 * 3 + 4 + 20, 17 * 2 + 4 + 18)
        assert (g.offset_x, g.offset_y) == (22, 20)

    def test_larger_glyph(self):
        bounds = BoundingBox(0, 0, 0, 0)
        g = derive_geometry(bounds, GlyphSize(height=30, width=40), coordinates=False)
        assert g.cell_diameter == 50
        assert g.image_width == 54


class TestGridHelpers:
    def test_char_at_out_of_range(self):
        rows = ["ab ", "c "]
        assert char_at(rows, 0, 1) == "b"
        assert char_at(rows, 1, 2) == ""
        assert char_at(rows, 2, 0) == ""
        assert char_at(rows, -1, 0) == ""
        assert char_at(rows, 0, -1) == ""

    def test_to_grid_pads_rows(self):
        grid = to_grid(["ab ", "c "])
        assert grid.shape == (2, 3)
        assert grid[1, 2] == " "
        assert not grid.flags.writeable
        assert char_at(grid, 0, 1) == "b"
