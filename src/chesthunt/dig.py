"""Digging: reveal one cell, tally chest pieces and detect finished chests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import Board, Cell, CellState, ChestType

logger = logging.getLogger(__name__)


class ProgressCounters:
    """Pieces of each chest type found so far on one opponent board."""

    def __init__(self) -> None:
        self._found: List[int] = [0] * len(ChestType)

    def __getitem__(self, chest: ChestType) -> int:
        return self._found[ChestType(chest).index]

    def record(self, chest: ChestType) -> int:
        """Count one more piece of *chest* and return the new tally."""
        idx = ChestType(chest).index
        self._found[idx] += 1
        return self._found[idx]

    def is_complete(self, chest: ChestType) -> bool:
        return self[chest] == ChestType(chest).length

    def all_complete(self) -> bool:
        return all(self.is_complete(chest) for chest in ChestType)

    def as_list(self) -> List[int]:
        return list(self._found)

    def __repr__(self) -> str:
        return f"ProgressCounters({self._found})"


class DigResult(Enum):
    ALREADY_DUG = "already_dug"
    MISSED = "missed"
    HIT = "hit"


@dataclass(frozen=True)
class ChestFullyFound:
    chest: ChestType
    length: int


@dataclass(frozen=True)
class DigOutcome:
    result: DigResult
    chest: Optional[ChestType] = None
    completed: Optional[ChestFullyFound] = None


def dig(board: Board, counters: ProgressCounters, row: int, col: int) -> DigOutcome:
    """Dig (*row*, *col*) on *board*, updating *counters* on a hit.

    Raises OutOfBounds for coordinates off the board.  Digging a cell that was
    already dug changes nothing and reports ALREADY_DUG.
    """
    cell = board.cell_at(row, col)

    if cell.is_dug:
        logger.debug("dig (%d,%d) – already dug", row, col)
        return DigOutcome(DigResult.ALREADY_DUG, cell.chest)

    if cell.state is CellState.EMPTY:
        board.set_cell(row, col, Cell.dug())
        logger.debug("dig (%d,%d) – missed", row, col)
        return DigOutcome(DigResult.MISSED)

    chest = cell.chest
    assert chest is not None
    board.set_cell(row, col, Cell.dug_chest(chest))
    found = counters.record(chest)
    logger.debug("dig (%d,%d) – hit %s (%d/%d)", row, col, chest.name, found, chest.length)
    completed = ChestFullyFound(chest, chest.length) if found == chest.length else None
    return DigOutcome(DigResult.HIT, chest, completed)
