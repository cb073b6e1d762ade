#!/usr/bin/env python3
"""
Print a position from both sides of the board.

Plays a short opening with python-chess and renders the result with the
default ASCII style.
"""

import logging

import chess
from rich.console import Console

from chess_ascii.board import Orientation
from chess_ascii.chess_position import ChessPosition
from chess_ascii.renderer import ASCIIPositionRenderer
from chess_ascii.style import DefaultASCIIStyle

logging.basicConfig(level=logging.DEBUG)

console = Console()

OPENING = ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6"]


def main() -> None:
    """Render the Ruy Lopez from white's and black's side."""
    board = chess.Board()
    for san in OPENING:
        board.push_san(san)
    position = ChessPosition.from_board(board)
    style = DefaultASCIIStyle()

    for orientation in Orientation:
        console.print(f"[cyan]Viewed from {orientation.value}[/cyan]")
        text = ASCIIPositionRenderer(style, orientation).render_to_string(position)
        console.print(text, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
