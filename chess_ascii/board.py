"""Read-only board model consumed by the renderer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from chess_ascii.errors import BoundsError


class SquareColor(Enum):
    LIGHT = "light"
    DARK = "dark"


class PieceColor(Enum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Orientation(Enum):
    """Which side the board is drawn from."""

    WHITE = "white"
    BLACK = "black"

    @classmethod
    def from_name(cls, name: str) -> "Orientation":
        """
        Parse an orientation from its name ('white' or 'black').

        :param name: Orientation name, case insensitive
        :type name: str
        :return: Matching orientation
        :rtype: Orientation
        :raises ValueError: If the name is unknown
        """
        return cls(name.strip().lower())


@dataclass(frozen=True)
class Coordinate:
    row: int
    column: int


@dataclass(frozen=True)
class Piece:
    color: PieceColor
    kind: PieceKind


class Occupant(Protocol):
    """A piece standing on a square."""

    @property
    def color(self) -> PieceColor: ...

    @property
    def kind(self) -> PieceKind: ...


class Board(Protocol):
    """Geometry and square coloring of a board."""

    def row_count(self) -> int: ...

    def column_count(self) -> int: ...

    def square_color(self, coordinate: Coordinate) -> SquareColor: ...


class Position(Protocol):
    """Snapshot of the pieces standing on a board."""

    def board(self) -> Board: ...

    def occupant_at(self, coordinate: Coordinate) -> Optional[Occupant]: ...


def check_bounds(coordinate: Coordinate, row_count: int, column_count: int) -> None:
    """
    Ensure a coordinate lies within the board.

    :param coordinate: Coordinate to check
    :type coordinate: Coordinate
    :param row_count: Number of rows of the board
    :type row_count: int
    :param column_count: Number of columns of the board
    :type column_count: int
    :raises BoundsError: If the coordinate is outside [0, rows) x [0, columns)
    """
    if not (0 <= coordinate.row < row_count and 0 <= coordinate.column < column_count):
        raise BoundsError(
            f"Coordinate ({coordinate.row}, {coordinate.column}) is outside a "
            f"{row_count}x{column_count} board"
        )
