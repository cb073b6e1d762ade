"""
Shared fixtures: a minimal in-memory position with arbitrary geometry.

The python-chess adapter only covers 8x8 boards, so geometry tests use this one.
"""

from typing import Dict, Optional

import pytest

from chess_ascii.board import Coordinate, Piece, SquareColor, check_bounds


class GridBoard:
    """Board of any size, a1-style coloring: (0, 0) is dark."""

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns

    def row_count(self) -> int:
        return self.rows

    def column_count(self) -> int:
        return self.columns

    def square_color(self, coordinate: Coordinate) -> SquareColor:
        check_bounds(coordinate, self.rows, self.columns)
        return SquareColor.DARK if (coordinate.row + coordinate.column) % 2 == 0 else SquareColor.LIGHT


class GridPosition:
    """Position holding a fixed mapping of coordinates to pieces."""

    def __init__(self, rows: int, columns: int, pieces: Optional[Dict[Coordinate, Piece]] = None) -> None:
        self._board = GridBoard(rows, columns)
        self.pieces = pieces or {}

    def board(self) -> GridBoard:
        return self._board

    def occupant_at(self, coordinate: Coordinate) -> Optional[Piece]:
        check_bounds(coordinate, self._board.rows, self._board.columns)
        return self.pieces.get(coordinate)


@pytest.fixture
def make_position():
    """Factory building GridPosition instances."""
    return GridPosition
