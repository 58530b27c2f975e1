"""
board.py

Core data structures for the treasure hunt:
 - ChestType, the closed roster of five chests (codes 11..15)
 - Cell, an explicit tagged value for what a single square holds
 - Board, the per-player grid of cells

Each player owns exactly one Board.  It is only ever mutated by the placement
and dig operations; everything else reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple

from . import config as _cfg

Coord = Tuple[int, int]


class OutOfBounds(IndexError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, row: int, col: int, rows: int = _cfg.ROWS, cols: int = _cfg.COLS) -> None:
        super().__init__(f"({row}, {col}) is outside the {rows}x{cols} board")
        self.row = row
        self.col = col


class ChestType(IntEnum):
    """The five chest kinds.  The numeric value is the legacy chest code."""

    BRONZE = 11
    SILVER = 12
    GOLD = 13
    RUBIES = 14
    VIBRANIUM = 15

    @property
    def length(self) -> int:
        """Number of cells the chest occupies (code 11 -> 5 ... code 15 -> 1)."""
        return 16 - int(self)

    @property
    def index(self) -> int:
        """Zero-based slot used by progress counters."""
        return int(self) - 11

    @property
    def display_name(self) -> str:
        return _cfg.CHEST_NAMES[int(self)]


class CellState(Enum):
    EMPTY = "empty"
    CHEST = "chest"
    DUG = "dug"
    DUG_CHEST = "dug_chest"


@dataclass(frozen=True, slots=True)
class Cell:
    """
    What one square holds.  Transitions only ever go
    EMPTY -> CHEST -> DUG_CHEST or EMPTY -> DUG.

    ``chest`` is set exactly when ``state`` is CHEST or DUG_CHEST.
    """

    state: CellState
    chest: Optional[ChestType] = None

    def __post_init__(self) -> None:
        has_chest = self.state in (CellState.CHEST, CellState.DUG_CHEST)
        if has_chest != (self.chest is not None):
            raise ValueError(f"invalid cell: state={self.state} chest={self.chest}")

    @classmethod
    def dug(cls) -> "Cell":
        return DUG

    @classmethod
    def with_chest(cls, chest: ChestType) -> "Cell":
        return cls(CellState.CHEST, ChestType(chest))

    @classmethod
    def dug_chest(cls, chest: ChestType) -> "Cell":
        return cls(CellState.DUG_CHEST, ChestType(chest))

    @property
    def is_dug(self) -> bool:
        return self.state in (CellState.DUG, CellState.DUG_CHEST)

    @property
    def has_chest(self) -> bool:
        """True for chest cells, dug or not."""
        return self.chest is not None

    # Legacy integer encoding: 0 empty, 11..15 chest, -1 dug, -11..-15 dug chest.
    @property
    def code(self) -> int:
        if self.state is CellState.EMPTY:
            return 0
        if self.state is CellState.DUG:
            return -1
        assert self.chest is not None
        return int(self.chest) if self.state is CellState.CHEST else -int(self.chest)

    @classmethod
    def from_code(cls, code: int) -> "Cell":
        if code == 0:
            return EMPTY
        if code == -1:
            return DUG
        if code > 0:
            return cls.with_chest(ChestType(code))
        return cls.dug_chest(ChestType(-code))


EMPTY = Cell(CellState.EMPTY)
DUG = Cell(CellState.DUG)


class Board:
    """
    Represents a single player's private grid.

    ``cells`` is a row-major list of lists of :class:`Cell`.  Use
    :meth:`cell_at` for bounds-checked reads; :meth:`set_cell` is reserved for
    the placement and dig operations.
    """

    def __init__(self, rows: int = _cfg.ROWS, cols: int = _cfg.COLS):
        """Initialise an empty *rows*×*cols* board."""
        self.rows = rows
        self.cols = cols
        self.cells: List[List[Cell]] = [[EMPTY for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return self.cells[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        self.cells[row][col] = cell

    def coords(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def has_remaining_chests(self) -> bool:
        """Return True while at least one chest cell has not been dug yet."""
        return any(cell.state is CellState.CHEST for row in self.cells for cell in row)

    def codes(self) -> List[List[int]]:
        """Snapshot of the board in the legacy integer encoding."""
        return [[cell.code for cell in row] for row in self.cells]

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols})"
