"""Position adapter backed by python-chess."""

from typing import Dict, Optional

import chess

from chess_ascii.board import Coordinate, Piece, PieceColor, PieceKind, SquareColor, check_bounds
from chess_ascii.errors import PreconditionError

PIECE_KINDS: Dict[int, PieceKind] = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}


class ChessBoardGeometry:
    """The standard 8x8 board: rows are ranks (0 = rank 1), columns are files (0 = file a)."""

    def row_count(self) -> int:
        """
        Get the number of ranks.

        :return: 8
        :rtype: int
        """
        return len(chess.RANK_NAMES)

    def column_count(self) -> int:
        """
        Get the number of files.

        :return: 8
        :rtype: int
        """
        return len(chess.FILE_NAMES)

    def square_color(self, coordinate: Coordinate) -> SquareColor:
        """
        Get the color of a square.

        :param coordinate: Square to look up
        :type coordinate: Coordinate
        :return: LIGHT or DARK
        :rtype: SquareColor
        :raises BoundsError: If the coordinate is outside the board
        """
        square = to_square(coordinate)
        return SquareColor.LIGHT if chess.BB_LIGHT_SQUARES & chess.BB_SQUARES[square] else SquareColor.DARK


class ChessPosition:
    """
    Read-only view of a python-chess board.

    The wrapped ``chess.Board`` is copied on construction so the view stays
    stable while the original game keeps moving.
    """

    def __init__(self, board: Optional[chess.Board] = None) -> None:
        """
        Initialize a view on the given board, or on the starting position.

        :param board: Board to snapshot
        :type board: Optional[chess.Board]
        """
        self._chess_board = board.copy(stack=False) if board is not None else chess.Board()
        self._geometry = ChessBoardGeometry()

    @classmethod
    def from_fen(cls, fen: str) -> "ChessPosition":
        """
        Build a position from a FEN string.

        Only the piece placement part is required; a full FEN is accepted too.

        :param fen: FEN string
        :type fen: str
        :return: Position view
        :rtype: ChessPosition
        :raises PreconditionError: If the FEN cannot be parsed
        """
        board = chess.Board(None)
        try:
            board.set_board_fen(fen.split(" ")[0])
        except ValueError as exc:
            raise PreconditionError(f"Invalid FEN '{fen}': {exc}") from exc
        return cls(board)

    @classmethod
    def from_board(cls, board: chess.Board) -> "ChessPosition":
        """
        Build a position from a snapshot of a python-chess board.

        :param board: Board to copy
        :type board: chess.Board
        :return: Position view
        :rtype: ChessPosition
        """
        return cls(board)

    def board(self) -> ChessBoardGeometry:
        """
        Get the board geometry.

        :return: Geometry of the standard 8x8 board
        :rtype: ChessBoardGeometry
        """
        return self._geometry

    def occupant_at(self, coordinate: Coordinate) -> Optional[Piece]:
        """
        Get the piece standing on a square.

        :param coordinate: Square to look up
        :type coordinate: Coordinate
        :return: The piece, or None for an empty square
        :rtype: Optional[Piece]
        :raises BoundsError: If the coordinate is outside the board
        """
        piece = self._chess_board.piece_at(to_square(coordinate))
        if piece is None:
            return None
        color = PieceColor.WHITE if piece.color == chess.WHITE else PieceColor.BLACK
        return Piece(color, PIECE_KINDS[piece.piece_type])

    def get_board_fen(self) -> str:
        """
        Get the piece placement part of the FEN of the snapshot.

        :return: Board FEN string
        :rtype: str
        """
        return self._chess_board.board_fen()


def to_square(coordinate: Coordinate) -> chess.Square:
    """
    Convert a coordinate into a python-chess square index.

    :param coordinate: Coordinate with row = rank index and column = file index
    :type coordinate: Coordinate
    :return: Square index (0 = a1, 63 = h8)
    :rtype: chess.Square
    :raises BoundsError: If the coordinate is outside the board
    """
    check_bounds(coordinate, len(chess.RANK_NAMES), len(chess.FILE_NAMES))
    return chess.square(coordinate.column, coordinate.row)
