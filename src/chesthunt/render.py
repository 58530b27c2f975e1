# render.py
"""
Board → text helpers for the console
––––––––––––––––––––––––––––––––––––
• glyph()       – single Cell → display character
• grid_rows()   – Board → ["    -    a    a ...", …] (chests optionally revealed)
• board_lines() – grid_rows() plus optional title banner and index header
• print_board() – print board_lines()

Two views exist.  The fog view is what a player sees of the *opponent's* board:
only their own dig history.  The full-reveal view is a player's *own* board.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .board import Board, Cell, CellState

logger = logging.getLogger(__name__)

CELL_WIDTH = 5

EMPTY_GLYPH = "-"
DUG_GLYPH = "X"
FOUND_GLYPH = "@"


def glyph(cell: Cell, *, reveal: bool = False) -> str:
    if cell.state is CellState.EMPTY:
        return EMPTY_GLYPH
    if cell.state is CellState.DUG:
        return DUG_GLYPH
    assert cell.chest is not None
    letter = chr(ord("a") + cell.chest.index)
    if cell.state is CellState.CHEST:
        # Undug chests stay hidden in the fog view
        return letter if reveal else EMPTY_GLYPH
    return letter.upper() if reveal else FOUND_GLYPH


def grid_rows(board: Board, *, reveal: bool = False) -> List[str]:
    logger.debug("grid_rows() – reveal=%s", reveal)
    return [
        "".join(f"{glyph(cell, reveal=reveal):>{CELL_WIDTH}}" for cell in row)
        for row in board.cells
    ]


def board_lines(
    board: Board,
    *,
    reveal: bool = False,
    title: Optional[str] = None,
    header: bool = False,
) -> List[str]:
    lines: List[str] = []
    if title is not None:
        lines.append(f"\n{title.center(50, '_')}")
    rows = grid_rows(board, reveal=reveal)
    if header:
        lines.append("   " + "".join(f"{c:>{CELL_WIDTH}}" for c in range(board.cols)))
        rows = [f"{r:>3}{row}" for r, row in enumerate(rows)]
    lines.extend(rows)
    return lines


def print_board(
    board: Board,
    *,
    reveal: bool = False,
    title: Optional[str] = None,
    header: bool = False,
) -> None:
    """Pretty-print *board* (full reveal if *reveal*, fog view otherwise)."""
    print("\n".join(board_lines(board, reveal=reveal, title=title, header=header)))
