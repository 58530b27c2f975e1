"""Chest placement: validate a span, then write it in one go."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from . import config as _cfg
from .board import Board, Cell, CellState, ChestType, Coord, OutOfBounds

logger = logging.getLogger(__name__)


class Overlap(ValueError):
    """Raised when a chest would cover a cell that is not empty."""

    def __init__(self, chest: ChestType, row: int, col: int) -> None:
        super().__init__(f"{chest.display_name} chest would overlap at ({row}, {col})")
        self.chest = chest
        self.row = row
        self.col = col


class Orientation(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


@dataclass(frozen=True)
class ChestPlacement:
    row: int
    col: int
    chest: ChestType
    orientation: Orientation = Orientation.HORIZONTAL

    def span(self) -> List[Coord]:
        """Cells covered, starting at the origin and running right or down."""
        n = ChestType(self.chest).length
        if Orientation(self.orientation) is Orientation.HORIZONTAL:
            return [(self.row, self.col + i) for i in range(n)]
        return [(self.row + i, self.col) for i in range(n)]


def check_placement(board: Board, placement: ChestPlacement) -> None:
    """Raise OutOfBounds or Overlap if *placement* cannot go on *board*."""
    span = placement.span()
    for r, c in span:
        if not board.in_bounds(r, c):
            raise OutOfBounds(r, c, board.rows, board.cols)
    for r, c in span:
        if board.cells[r][c].state is not CellState.EMPTY:
            raise Overlap(ChestType(placement.chest), r, c)


def place_chest(board: Board, placement: ChestPlacement) -> List[Coord]:
    """Write *placement* onto *board* and return the occupied cells.

    Nothing is written unless the whole span passes the bounds and overlap
    checks.
    """
    check_placement(board, placement)
    cell = Cell.with_chest(placement.chest)
    span = placement.span()
    for r, c in span:
        board.set_cell(r, c, cell)
    logger.debug("placed %s at %s", ChestType(placement.chest).name, span)
    return span


def try_place(board: Board, placement: ChestPlacement) -> bool:
    """Return True if *placement* was committed, False if it was rejected."""
    try:
        place_chest(board, placement)
    except (OutOfBounds, Overlap) as e:
        logger.debug("placement rejected – %s", e)
        return False
    return True


def random_placement(
    board: Board,
    chest: ChestType,
    orientation: Orientation,
    rnd: random.Random,
    *,
    max_attempts: Optional[int] = None,
) -> ChestPlacement:
    """Resample the origin uniformly until *chest* fits, then commit it.

    Chest type and orientation stay fixed across attempts; only the origin
    changes.
    """
    limit = _cfg.AI_MAX_ATTEMPTS if max_attempts is None else max_attempts
    for attempt in range(1, limit + 1):
        placement = ChestPlacement(
            row=rnd.randrange(board.rows),
            col=rnd.randrange(board.cols),
            chest=chest,
            orientation=orientation,
        )
        if try_place(board, placement):
            logger.debug("random placement of %s took %d attempt(s)", chest.name, attempt)
            return placement
    raise RuntimeError(f"Failed to place {chest.display_name} chest after {limit} attempts")
