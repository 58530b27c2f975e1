"""Treasure hunt: a two-board chest placing and digging game against a random AI."""

from .board import Board, Cell, CellState, ChestType, OutOfBounds
from .dig import ChestFullyFound, DigOutcome, DigResult, ProgressCounters, dig
from .game import GameLoop, Phase, RoundResult, Side
from .placement import ChestPlacement, Orientation, Overlap, place_chest, try_place

__all__ = [
    "Board",
    "Cell",
    "CellState",
    "ChestType",
    "OutOfBounds",
    "ChestFullyFound",
    "DigOutcome",
    "DigResult",
    "ProgressCounters",
    "dig",
    "GameLoop",
    "Phase",
    "RoundResult",
    "Side",
    "ChestPlacement",
    "Orientation",
    "Overlap",
    "place_chest",
    "try_place",
]
