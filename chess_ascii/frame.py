"""Borders, rank margin and file banner drawn around the assembled grid."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from chess_ascii.board import Orientation
from chess_ascii.errors import ConfigurationError
from chess_ascii.style import ASCIIStyle

logger = logging.getLogger(__name__)

# Rank digits 8 down to 1, five lines per rank.
MARGIN_WHITE: Tuple[str, ...] = (
    "     ", "  _  ", " (_) ", " (_) ", "     ",
    "     ", "  __ ", "   / ", "  /  ", "     ",
    "     ", "     ", "  /  ", " (_) ", "     ",
    "     ", "  _  ", " |_  ", "  _) ", "     ",
    "     ", "   . ", "  /| ", " '-| ", "     ",
    "     ", "  _  ", "  _) ", "  _) ", "     ",
    "     ", "  _  ", "   ) ", "  /_ ", "     ",
    "     ", "     ", "  /| ", "   | ", "     ",
)

# Rank digits 1 up to 8.
MARGIN_BLACK: Tuple[str, ...] = (
    "     ", "     ", "  /| ", "   | ", "     ",
    "     ", "  _  ", "   ) ", "  /_ ", "     ",
    "     ", "  _  ", "  _) ", "  _) ", "     ",
    "     ", "   . ", "  /| ", " '-| ", "     ",
    "     ", "  _  ", " |_  ", "  _) ", "     ",
    "     ", "     ", "  /  ", " (_) ", "     ",
    "     ", "  __ ", "   / ", "  /  ", "     ",
    "     ", "  _  ", " (_) ", " (_) ", "     ",
)

BANNER_WHITE: Tuple[str, ...] = (
    "                   _        _        _        __       __       _              ",
    "         /\\       |_)      /        | \\      |_       |_       /        |_|    ",
    "        /--\\      |_)      \\_       |_/      |__      |        \\_?      | |    ",
    "                                                                               ",
)

BANNER_BLACK: Tuple[str, ...] = (
    "                 _        __        __        _         _        _             ",
    "       |_|      /        |_        |_        | \\       /        |_)      /\\    ",
    "       | |      \\_?      |         |__       |_/       \\_       |_)     /--\\   ",
    "                                                                               ",
)


@dataclass(frozen=True)
class FrameAssets:
    """Decorative text drawn around the board, one table per orientation."""

    margin_width: int
    margins: Dict[Orientation, Tuple[str, ...]]
    banners: Dict[Orientation, Tuple[str, ...]]

    def validate(self, grid_height: int) -> None:
        """
        Check that the margin tables fit a grid.

        :param grid_height: Number of character rows of the assembled grid
        :type grid_height: int
        :raises ConfigurationError: If a table is missing, has the wrong length or an entry has the wrong width
        """
        for orientation in Orientation:
            if orientation not in self.margins or orientation not in self.banners:
                raise ConfigurationError(f"Frame assets have no table for orientation {orientation.value}")
            margin = self.margins[orientation]
            if len(margin) != grid_height:
                raise ConfigurationError(
                    f"Margin table for {orientation.value} has {len(margin)} entries, "
                    f"grid has {grid_height} rows"
                )
            for index, fragment in enumerate(margin):
                if len(fragment) != self.margin_width:
                    raise ConfigurationError(
                        f"Margin entry {index} for {orientation.value} is {len(fragment)} characters wide, "
                        f"expected {self.margin_width}"
                    )


DEFAULT_FRAME_ASSETS = FrameAssets(
    margin_width=5,
    margins={Orientation.WHITE: MARGIN_WHITE, Orientation.BLACK: MARGIN_BLACK},
    banners={Orientation.WHITE: BANNER_WHITE, Orientation.BLACK: BANNER_BLACK},
)


def border_line(assets: FrameAssets, border: str, grid_width: int) -> str:
    """
    Build the top or bottom border line.

    :param assets: Frame assets giving the margin width
    :type assets: FrameAssets
    :param border: Border fill character
    :type border: str
    :param grid_width: Number of character columns of the grid
    :type grid_width: int
    :return: Blank margin followed by the border spanning the grid and both side borders
    :rtype: str
    """
    return " " * assets.margin_width + border * (grid_width + 2)


def draw_frame(
    grid: Sequence[Sequence[str]],
    orientation: Orientation,
    style: ASCIIStyle,
    assets: FrameAssets,
    line_separator: str,
) -> str:
    """
    Frame a grid whose assets have already been validated against it.

    Every line, the last banner line included, ends with the line separator.
    """
    grid_height = len(grid)
    grid_width = len(grid[0]) if grid else 0

    border = style.border_fill()
    margin = assets.margins[orientation]
    top = border_line(assets, border, grid_width)

    lines: List[str] = [top]
    for r, row in enumerate(grid):
        lines.append(f"{margin[r]}{border}{''.join(row)}{border}")
    lines.append(top)
    lines.extend(assets.banners[orientation])

    logger.debug(f"Decorated {grid_height}x{grid_width} grid for {orientation.value}")
    return "".join(line + line_separator for line in lines)


def decorate(
    grid: Sequence[Sequence[str]],
    orientation: Orientation,
    style: ASCIIStyle,
    assets: FrameAssets = DEFAULT_FRAME_ASSETS,
    line_separator: str = "\n",
) -> str:
    """
    Frame an assembled grid and append the banner.

    :param grid: Assembled character grid
    :type grid: Sequence[Sequence[str]]
    :param orientation: Side the board is viewed from
    :type orientation: Orientation
    :param style: Style providing the border fill
    :type style: ASCIIStyle
    :param assets: Margin and banner tables
    :type assets: FrameAssets
    :param line_separator: Line terminator
    :type line_separator: str
    :return: Rendered text
    :rtype: str
    :raises ConfigurationError: If the assets do not fit the grid
    """
    assets.validate(len(grid))
    return draw_frame(grid, orientation, style, assets, line_separator)
