"""Mapping from board coordinates to positions in the rendered character grid."""

from typing import Tuple

from chess_ascii.board import Coordinate, Orientation, check_bounds


def target_coordinate(
    coordinate: Coordinate, row_count: int, column_count: int, orientation: Orientation
) -> Coordinate:
    """
    Get the screen cell of a board coordinate.

    Board row 0 is the first rank, drawn at the bottom when viewed from white.
    Viewing from black mirrors both rows and columns. The returned row counts
    from the top of the text.

    :param coordinate: Board coordinate
    :type coordinate: Coordinate
    :param row_count: Number of board rows
    :type row_count: int
    :param column_count: Number of board columns
    :type column_count: int
    :param orientation: Side the board is viewed from
    :type orientation: Orientation
    :return: Cell position on screen, (0, 0) being the top-left cell
    :rtype: Coordinate
    :raises BoundsError: If the coordinate is outside the board
    """
    check_bounds(coordinate, row_count, column_count)
    if orientation == Orientation.BLACK:
        target_row = row_count - 1 - coordinate.row
        target_col = column_count - 1 - coordinate.column
    else:
        target_row = coordinate.row
        target_col = coordinate.column
    return Coordinate(row_count - 1 - target_row, target_col)


def cell_offset(
    coordinate: Coordinate,
    row_count: int,
    column_count: int,
    orientation: Orientation,
    cell_rows: int,
    cell_cols: int,
) -> Tuple[int, int]:
    """
    Get the top-left character position of a coordinate's cell block.

    :return: (row offset, column offset) in the character grid
    :rtype: Tuple[int, int]
    :raises BoundsError: If the coordinate is outside the board
    """
    screen = target_coordinate(coordinate, row_count, column_count, orientation)
    return screen.row * cell_rows, screen.column * cell_cols
