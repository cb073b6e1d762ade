"""Composition of cell blocks into the full character grid."""

import logging
from typing import List, Optional

from chess_ascii.board import Coordinate, Occupant, Orientation, Position, SquareColor
from chess_ascii.errors import ConfigurationError
from chess_ascii.orientation import cell_offset
from chess_ascii.style import ASCIIStyle, CellBlock

logger = logging.getLogger(__name__)

CharacterGrid = List[List[str]]


def compose_cell(
    style: ASCIIStyle, square_color: SquareColor, coordinate: Coordinate, occupant: Optional[Occupant]
) -> CellBlock:
    """
    Build the character block of a single square.

    :param style: Style providing fills and glyphs
    :type style: ASCIIStyle
    :param square_color: Color of the square
    :type square_color: SquareColor
    :param coordinate: Board coordinate of the square
    :type coordinate: Coordinate
    :param occupant: Piece on the square, or None when empty
    :type occupant: Optional[Occupant]
    :return: Block of style.cell_rows x style.cell_cols characters
    :rtype: CellBlock
    :raises ConfigurationError: If the style resized the block or stamped anything but single characters
    """
    filling = style.background_fill(square_color)
    block = [[filling] * style.cell_cols for _ in range(style.cell_rows)]
    if occupant is not None:
        style.render_cell(block, coordinate, occupant)
        if len(block) != style.cell_rows or any(len(row) != style.cell_cols for row in block):
            raise ConfigurationError(
                f"{type(style).__name__}.render_cell resized the block at "
                f"({coordinate.row}, {coordinate.column})"
            )
        for row in block:
            for char in row:
                if not isinstance(char, str) or len(char) != 1:
                    raise ConfigurationError(
                        f"{type(style).__name__}.render_cell stamped {char!r} at "
                        f"({coordinate.row}, {coordinate.column}), expected a single character"
                    )
    return block


def assemble(position: Position, style: ASCIIStyle, orientation: Orientation) -> CharacterGrid:
    """
    Tile the cell blocks of every square into one character grid.

    :param position: Position to draw
    :type position: Position
    :param style: Style providing fills and glyphs
    :type style: ASCIIStyle
    :param orientation: Side the board is viewed from
    :type orientation: Orientation
    :return: Grid of rows*cell_rows lines, each cols*cell_cols characters wide
    :rtype: CharacterGrid
    :raises BoundsError: If the board rejects one of its own coordinates
    """
    board = position.board()
    nb_rows = board.row_count()
    nb_columns = board.column_count()
    cell_rows = style.cell_rows
    cell_cols = style.cell_cols

    grid: CharacterGrid = [[""] * (nb_columns * cell_cols) for _ in range(nb_rows * cell_rows)]

    for row in range(nb_rows):
        for col in range(nb_columns):
            coordinate = Coordinate(row, col)
            cell = compose_cell(style, board.square_color(coordinate), coordinate, position.occupant_at(coordinate))
            row_offset, col_offset = cell_offset(coordinate, nb_rows, nb_columns, orientation, cell_rows, cell_cols)
            for ti in range(cell_rows):
                grid[row_offset + ti][col_offset:col_offset + cell_cols] = cell[ti]

    logger.debug(f"Assembled {nb_rows}x{nb_columns} board into {len(grid)} grid rows")
    return grid
