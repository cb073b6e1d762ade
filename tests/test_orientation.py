"""Tests for the board-to-screen coordinate mapping."""

import pytest

from chess_ascii.board import Coordinate, Orientation
from chess_ascii.errors import BoundsError
from chess_ascii.orientation import cell_offset, target_coordinate


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize("rows,columns", [(8, 8), (3, 5), (1, 1), (4, 2)])
def test_offsets_are_a_bijection(orientation, rows, columns):
    """
    Test every coordinate lands on a distinct cell and all cells are covered.

    :return: None
    :rtype: None
    """
    offsets = {
        cell_offset(Coordinate(row, col), rows, columns, orientation, 5, 9)
        for row in range(rows)
        for col in range(columns)
    }
    expected = {(r * 5, c * 9) for r in range(rows) for c in range(columns)}
    assert len(offsets) == rows * columns
    assert offsets == expected


def test_white_puts_first_row_at_bottom_left():
    """
    Test that viewed from white, row 0 column 0 is the bottom-left cell.

    :return: None
    :rtype: None
    """
    assert target_coordinate(Coordinate(0, 0), 8, 8, Orientation.WHITE) == Coordinate(7, 0)
    assert cell_offset(Coordinate(0, 0), 8, 8, Orientation.WHITE, 5, 9) == (35, 0)
    assert cell_offset(Coordinate(7, 7), 8, 8, Orientation.WHITE, 5, 9) == (0, 63)


def test_black_mirrors_rows_and_columns():
    """
    Test that viewed from black, row 0 column 0 is the top-right cell.

    :return: None
    :rtype: None
    """
    assert target_coordinate(Coordinate(0, 0), 8, 8, Orientation.BLACK) == Coordinate(0, 7)
    assert cell_offset(Coordinate(0, 0), 8, 8, Orientation.BLACK, 5, 9) == (0, 63)
    assert cell_offset(Coordinate(7, 0), 8, 8, Orientation.BLACK, 5, 9) == (35, 63)


def test_non_square_board_black():
    """
    Test mirroring on a board with more columns than rows.

    :return: None
    :rtype: None
    """
    assert target_coordinate(Coordinate(0, 0), 2, 4, Orientation.BLACK) == Coordinate(0, 3)
    assert target_coordinate(Coordinate(1, 3), 2, 4, Orientation.BLACK) == Coordinate(1, 0)


@pytest.mark.parametrize("coordinate", [Coordinate(-1, 0), Coordinate(0, 8), Coordinate(8, 0)])
def test_out_of_bounds_coordinate(coordinate):
    """
    Test that coordinates outside the board raise BoundsError.

    :return: None
    :rtype: None
    """
    with pytest.raises(BoundsError):
        cell_offset(coordinate, 8, 8, Orientation.WHITE, 5, 9)
