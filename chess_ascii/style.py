"""Cell styles: background fills, border fill and piece glyphs."""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from chess_ascii.board import Coordinate, Occupant, PieceColor, PieceKind, SquareColor
from chess_ascii.errors import ConfigurationError

CellBlock = List[List[str]]

# Glyph pattern characters: space is transparent, '*' is the body fill.
TRANSPARENT = " "
BODY = "*"

PIECE_GLYPHS: Dict[PieceKind, Tuple[str, ...]] = {
    PieceKind.PAWN: (
        "         ",
        "    _    ",
        "   (*)   ",
        "   /*\\   ",
        "  /___\\  ",
    ),
    PieceKind.KNIGHT: (
        "         ",
        "   __/>  ",
        "  /***)  ",
        "   )*(   ",
        "  /___\\  ",
    ),
    PieceKind.BISHOP: (
        "    o    ",
        "   (/)   ",
        "   |*|   ",
        "   )*(   ",
        "  /___\\  ",
    ),
    PieceKind.ROOK: (
        "         ",
        "  |_|_|  ",
        "  |***|  ",
        "  |***|  ",
        "  /___\\  ",
    ),
    PieceKind.QUEEN: (
        "  .www.  ",
        "   )*(   ",
        "   |*|   ",
        "   )*(   ",
        "  /___\\  ",
    ),
    PieceKind.KING: (
        "    +    ",
        "  .-^-.  ",
        "   )*(   ",
        "   |*|   ",
        "  /___\\  ",
    ),
}


class ASCIIStyle(ABC):
    """
    Policy deciding how a board looks: fill characters and piece glyphs.

    Implementations must be reentrant; one instance may serve many renders.
    """

    cell_rows: int = 5
    cell_cols: int = 9

    @abstractmethod
    def background_fill(self, square_color: SquareColor) -> str:
        """
        Get the character filling an empty square.

        :param square_color: Color of the square
        :type square_color: SquareColor
        :return: Single fill character
        :rtype: str
        """

    @abstractmethod
    def border_fill(self) -> str:
        """
        Get the character drawing the frame around the board.

        :return: Single border character
        :rtype: str
        """

    @abstractmethod
    def render_cell(self, block: CellBlock, coordinate: Coordinate, occupant: Occupant) -> None:
        """
        Stamp the glyph of an occupant into a background-filled cell block.

        The block is modified in place and must keep its dimensions.

        :param block: Cell block of cell_rows x cell_cols characters
        :type block: CellBlock
        :param coordinate: Board coordinate of the cell
        :type coordinate: Coordinate
        :param occupant: Piece standing on the square
        :type occupant: Occupant
        """

    def validate(self) -> None:
        """
        Check the style's geometry and fill characters.

        :raises ConfigurationError: If a cell dimension is not positive or a fill is not one character
        """
        if self.cell_rows <= 0 or self.cell_cols <= 0:
            raise ConfigurationError(
                f"Cell dimensions must be positive, got {self.cell_rows}x{self.cell_cols}"
            )
        fills = [self.background_fill(color) for color in SquareColor] + [self.border_fill()]
        for fill in fills:
            if len(fill) != 1:
                raise ConfigurationError(f"Fill characters must be exactly one character, got {fill!r}")


class DefaultASCIIStyle(ASCIIStyle):
    """Blank light squares, dotted dark squares, '#' border; black pieces have a '#' body."""

    LIGHT_FILL = " "
    DARK_FILL = "."
    BORDER_FILL = "#"
    BODY_FILLS = {PieceColor.WHITE: " ", PieceColor.BLACK: "#"}

    def background_fill(self, square_color: SquareColor) -> str:
        return self.LIGHT_FILL if square_color == SquareColor.LIGHT else self.DARK_FILL

    def border_fill(self) -> str:
        return self.BORDER_FILL

    def validate(self) -> None:
        """
        Check the style, including that every glyph pattern fills exactly one cell.

        :raises ConfigurationError: If the geometry or fills are invalid, or a glyph does not match the cell size
        """
        super().validate()
        for kind, pattern in PIECE_GLYPHS.items():
            if len(pattern) != self.cell_rows or any(len(line) != self.cell_cols for line in pattern):
                raise ConfigurationError(
                    f"Glyph for {kind.value} does not fit a {self.cell_rows}x{self.cell_cols} cell"
                )

    def render_cell(self, block: CellBlock, coordinate: Coordinate, occupant: Occupant) -> None:
        """Glyphs do not depend on the coordinate."""
        body_fill = self.BODY_FILLS[occupant.color]
        for row, pattern in enumerate(PIECE_GLYPHS[occupant.kind]):
            for col, char in enumerate(pattern):
                if char == TRANSPARENT:
                    continue
                block[row][col] = body_fill if char == BODY else char
