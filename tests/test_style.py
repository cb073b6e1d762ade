"""Tests for cell styles."""

import pytest

from chess_ascii.board import Coordinate, Piece, PieceColor, PieceKind, SquareColor
from chess_ascii.errors import ConfigurationError
from chess_ascii.style import PIECE_GLYPHS, ASCIIStyle, DefaultASCIIStyle


def blank_block(fill: str = "."):
    return [[fill] * 9 for _ in range(5)]


def test_glyphs_fit_the_cell():
    """
    Test every glyph pattern has the default cell dimensions.

    :return: None
    :rtype: None
    """
    for kind in PieceKind:
        pattern = PIECE_GLYPHS[kind]
        assert len(pattern) == ASCIIStyle.cell_rows
        assert all(len(line) == ASCIIStyle.cell_cols for line in pattern)


def test_fills():
    """
    Test the default background and border fills.

    :return: None
    :rtype: None
    """
    style = DefaultASCIIStyle()
    assert style.background_fill(SquareColor.LIGHT) == " "
    assert style.background_fill(SquareColor.DARK) == "."
    assert style.border_fill() == "#"


def test_white_and_black_pieces_differ():
    """
    Test the body fill tells white and black pieces apart.

    :return: None
    :rtype: None
    """
    style = DefaultASCIIStyle()
    white, black = blank_block(), blank_block()
    style.render_cell(white, Coordinate(0, 0), Piece(PieceColor.WHITE, PieceKind.PAWN))
    style.render_cell(black, Coordinate(0, 0), Piece(PieceColor.BLACK, PieceKind.PAWN))
    assert "".join(white[2]) == "...( )..."
    assert "".join(black[2]) == "...(#)..."


def test_transparent_pixels_keep_background():
    """
    Test spaces in a glyph pattern leave the background untouched.

    :return: None
    :rtype: None
    """
    style = DefaultASCIIStyle()
    block = blank_block()
    style.render_cell(block, Coordinate(0, 0), Piece(PieceColor.WHITE, PieceKind.ROOK))
    assert "".join(block[0]) == "........."
    assert "".join(block[1]) == "..|_|_|.."


def test_every_kind_stamps_something():
    """
    Test every piece kind draws at least one character.

    :return: None
    :rtype: None
    """
    style = DefaultASCIIStyle()
    glyphs = set()
    for kind in PieceKind:
        block = blank_block()
        style.render_cell(block, Coordinate(0, 0), Piece(PieceColor.BLACK, kind))
        assert block != blank_block()
        glyphs.add(tuple("".join(row) for row in block))
    assert len(glyphs) == len(PieceKind)


def test_validate_rejects_non_positive_dimensions():
    """
    Test a style declaring an empty cell is a configuration error.

    :return: None
    :rtype: None
    """

    class FlatStyle(DefaultASCIIStyle):
        cell_rows = 0

    with pytest.raises(ConfigurationError):
        FlatStyle().validate()


def test_validate_rejects_glyphs_larger_than_cell():
    """
    Test shrinking the cell of the default style is a configuration error.

    :return: None
    :rtype: None
    """

    class ShortStyle(DefaultASCIIStyle):
        cell_rows = 4

    with pytest.raises(ConfigurationError):
        ShortStyle().validate()


def test_validate_rejects_glyphs_narrower_than_cell():
    """
    Test widening the cell of the default style is a configuration error.

    :return: None
    :rtype: None
    """

    class WideStyle(DefaultASCIIStyle):
        cell_cols = 11

    with pytest.raises(ConfigurationError):
        WideStyle().validate()


def test_default_style_validates():
    """
    Test the default style passes its own checks.

    :return: None
    :rtype: None
    """
    DefaultASCIIStyle().validate()


def test_validate_rejects_wide_fill():
    """
    Test fills must be a single character.

    :return: None
    :rtype: None
    """

    class WideBorderStyle(DefaultASCIIStyle):
        BORDER_FILL = "##"

    with pytest.raises(ConfigurationError):
        WideBorderStyle().validate()


def test_style_is_abstract():
    """
    Test the style contract cannot be instantiated directly.

    :return: None
    :rtype: None
    """
    with pytest.raises(TypeError):
        ASCIIStyle()
