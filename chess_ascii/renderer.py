"""Chess position text rendering module."""

import logging
import sys
from typing import Optional, TextIO

from chess_ascii.assembler import assemble
from chess_ascii.board import Orientation, Position
from chess_ascii.config import load_settings
from chess_ascii.errors import PreconditionError
from chess_ascii.frame import DEFAULT_FRAME_ASSETS, FrameAssets, draw_frame
from chess_ascii.style import ASCIIStyle, DefaultASCIIStyle

logger = logging.getLogger(__name__)


class ASCIIPositionRenderer:
    """
    Renders a position as framed ASCII art.

    The board is drawn cell by cell using the style, framed with a border,
    labelled with rank digits on the left and file letters underneath.
    """

    def __init__(
        self,
        style: ASCIIStyle,
        orientation: Orientation,
        line_separator: Optional[str] = None,
        assets: FrameAssets = DEFAULT_FRAME_ASSETS,
    ) -> None:
        """
        Initialize the renderer.

        :param style: Style providing fills and glyphs
        :type style: ASCIIStyle
        :param orientation: Side the board is viewed from
        :type orientation: Orientation
        :param line_separator: Line terminator, defaults to the configured one
        :type line_separator: Optional[str]
        :param assets: Margin and banner tables
        :type assets: FrameAssets
        :raises PreconditionError: If the style or orientation is missing
        """
        if not isinstance(style, ASCIIStyle):
            raise PreconditionError(f"A style is required, got {style!r}")
        if not isinstance(orientation, Orientation):
            raise PreconditionError(f"An orientation is required, got {orientation!r}")
        if assets is None:
            raise PreconditionError("Frame assets are required")
        self.style = style
        self.orientation = orientation
        self.assets = assets
        self.line_separator = line_separator if line_separator is not None else load_settings().line_separator

    def get_style(self) -> ASCIIStyle:
        """
        Get the style used by this renderer.

        :return: The style
        :rtype: ASCIIStyle
        """
        return self.style

    def render_to_string(self, position: Position) -> str:
        """
        Render a position to text.

        :param position: Position to draw
        :type position: Position
        :return: Rendered text, every line terminated by the line separator
        :rtype: str
        :raises PreconditionError: If the position is missing
        :raises ConfigurationError: If the style or frame assets are inconsistent with the board
        :raises BoundsError: If the board reports coordinates outside itself
        """
        if position is None:
            raise PreconditionError("A position is required")

        self.style.validate()
        board = position.board()
        self.assets.validate(board.row_count() * self.style.cell_rows)

        logger.debug(
            f"Rendering {board.row_count()}x{board.column_count()} board from {self.orientation.value}"
        )
        grid = assemble(position, self.style, self.orientation)
        return draw_frame(grid, self.orientation, self.style, self.assets, self.line_separator)

    def render(self, position: Position, out: Optional[TextIO] = None) -> str:
        """
        Render a position and write it to a text stream.

        Nothing is written when rendering fails.

        :param position: Position to draw
        :type position: Position
        :param out: Destination stream, defaults to sys.stdout
        :type out: Optional[TextIO]
        :return: The text that was written
        :rtype: str
        """
        text = self.render_to_string(position)
        (out if out is not None else sys.stdout).write(text)
        return text


def render(
    position: Position, orientation: Optional[Orientation] = None, style: Optional[ASCIIStyle] = None
) -> str:
    """
    Render a position in one call.

    :param position: Position to draw
    :type position: Position
    :param orientation: Side the board is viewed from, defaults to the configured one
    :type orientation: Optional[Orientation]
    :param style: Style to use, defaults to DefaultASCIIStyle
    :type style: Optional[ASCIIStyle]
    :return: Rendered text
    :rtype: str
    """
    settings = load_settings()
    renderer = ASCIIPositionRenderer(
        style if style is not None else DefaultASCIIStyle(),
        orientation if orientation is not None else settings.orientation,
        settings.line_separator,
    )
    return renderer.render_to_string(position)
