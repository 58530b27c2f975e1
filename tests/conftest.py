import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from chesthunt.board import Board, ChestType, Coord
from chesthunt.bot_logic import RandomOpponent
from chesthunt.placement import ChestPlacement, Orientation, place_chest

# Suppress INFO & DEBUG logs during tests
logging.basicConfig(level=logging.WARNING)

# One chest per even row, all starting in column 0
LAYOUT: List[ChestPlacement] = [
    ChestPlacement(row=2 * i, col=0, chest=chest, orientation=Orientation.HORIZONTAL)
    for i, chest in enumerate(ChestType)
]


def chest_cells(board: Board) -> List[Coord]:
    """Coordinates of every chest cell, dug or not."""
    return [(r, c) for r, c in board.coords() if board.cells[r][c].has_chest]


def empty_cells(board: Board) -> List[Coord]:
    return [(r, c) for r, c in board.coords() if not board.cells[r][c].has_chest]


class ScriptedOpponent(RandomOpponent):
    """Random placement, but digs follow a fixed list (repeating the last one)."""

    def __init__(self, digs: Iterable[Coord], *, seed: int = 0) -> None:
        super().__init__(seed=seed)
        self._digs: Iterator[Coord] = iter(digs)
        self._last: Coord = (0, 0)

    def choose_dig(self, board: Board) -> Coord:
        self._last = next(self._digs, self._last)
        return self._last


class ScriptedPlayer:
    """Human side that replays fixed placements and digs."""

    def __init__(self, placements: Sequence[ChestPlacement], digs: Iterable[Coord]) -> None:
        self._placements = iter(placements)
        self._digs = iter(digs)
        self.placement_calls = 0
        self.dig_calls = 0

    def choose_placement(self, board: Board, remaining: Sequence[ChestType]) -> ChestPlacement:
        self.placement_calls += 1
        return next(self._placements)

    def choose_dig(self, own_board: Board, opponent_board: Board) -> Coord:
        self.dig_calls += 1
        return next(self._digs)


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def full_board() -> Board:
    """A board holding all five chests laid out by LAYOUT."""
    b = Board()
    for placement in LAYOUT:
        place_chest(b, placement)
    return b
