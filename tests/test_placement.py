"""Chest placement rules: bounds, overlap and all-or-nothing commits."""

from __future__ import annotations

import random

import pytest

from chesthunt.board import Board, Cell, CellState, ChestType, OutOfBounds
from chesthunt.placement import (
    ChestPlacement,
    Orientation,
    Overlap,
    check_placement,
    place_chest,
    random_placement,
    try_place,
)

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


@pytest.mark.parametrize("chest", list(ChestType))
@pytest.mark.parametrize("orientation", [H, V])
def test_valid_placement_writes_contiguous_run(board: Board, chest: ChestType, orientation: Orientation) -> None:
    assert try_place(board, ChestPlacement(3, 2, chest, orientation))

    occupied = [(r, c) for r, c in board.coords() if board.cells[r][c].state is CellState.CHEST]
    assert len(occupied) == chest.length
    if orientation is H:
        assert occupied == [(3, 2 + i) for i in range(chest.length)]
    else:
        assert occupied == [(3 + i, 2) for i in range(chest.length)]
    assert all(board.cells[r][c] == Cell.with_chest(chest) for r, c in occupied)


def test_single_cell_chest_in_corner(board: Board) -> None:
    assert try_place(board, ChestPlacement(9, 9, ChestType.VIBRANIUM, H))
    assert board.cell_at(9, 9) == Cell.with_chest(ChestType.VIBRANIUM)


def test_bronze_past_right_edge_is_rejected(board: Board) -> None:
    """Columns 7..11 do not fit on a 10-wide board."""
    before = board.codes()
    assert not try_place(board, ChestPlacement(0, 7, ChestType.BRONZE, H))
    assert board.codes() == before
    with pytest.raises(OutOfBounds):
        place_chest(board, ChestPlacement(0, 7, ChestType.BRONZE, H))


@pytest.mark.parametrize(
    "placement",
    [
        ChestPlacement(6, 0, ChestType.BRONZE, V),
        ChestPlacement(0, 9, ChestType.RUBIES, H),
        ChestPlacement(-1, 0, ChestType.VIBRANIUM, H),
        ChestPlacement(0, 10, ChestType.VIBRANIUM, V),
    ],
)
def test_out_of_bounds_leaves_board_unchanged(full_board: Board, placement: ChestPlacement) -> None:
    before = full_board.codes()
    assert not try_place(full_board, placement)
    assert full_board.codes() == before


def test_silver_over_bronze_is_rejected(board: Board) -> None:
    assert try_place(board, ChestPlacement(0, 0, ChestType.BRONZE, H))
    before = board.codes()
    assert not try_place(board, ChestPlacement(0, 2, ChestType.SILVER, H))
    assert board.codes() == before
    with pytest.raises(Overlap):
        check_placement(board, ChestPlacement(0, 2, ChestType.SILVER, H))


def test_overlap_detected_on_last_cell_only(board: Board) -> None:
    """A clash on the far end of the span still blocks every write."""
    assert try_place(board, ChestPlacement(4, 0, ChestType.RUBIES, H))  # (4,0)-(4,1)
    before = board.codes()
    assert not try_place(board, ChestPlacement(0, 1, ChestType.BRONZE, V))  # (0,1)-(4,1)
    assert board.codes() == before


def test_overlap_with_dug_chest_is_rejected(board: Board) -> None:
    board.set_cell(5, 5, Cell.dug_chest(ChestType.GOLD))
    assert not try_place(board, ChestPlacement(5, 3, ChestType.GOLD, H))


def test_span_orientation() -> None:
    assert ChestPlacement(1, 1, ChestType.GOLD, H).span() == [(1, 1), (1, 2), (1, 3)]
    assert ChestPlacement(1, 1, ChestType.GOLD, V).span() == [(1, 1), (2, 1), (3, 1)]


@pytest.mark.parametrize("orientation", [2, -1])
def test_unknown_orientation_is_an_error(board: Board, orientation: int) -> None:
    with pytest.raises(ValueError):
        try_place(board, ChestPlacement(0, 0, ChestType.GOLD, orientation))
    assert board.codes() == Board().codes()


def test_random_placement_keeps_type_and_orientation(board: Board) -> None:
    rnd = random.Random(7)
    for chest in ChestType:
        placement = random_placement(board, chest, V, rnd)
        assert placement.chest == chest
        assert placement.orientation is V
    assert sum(cell.has_chest for row in board.cells for cell in row) == 15


def test_random_placement_gives_up_after_attempt_cap(board: Board) -> None:
    # Fill every column start so a vertical bronze can never fit
    for c in range(board.cols):
        board.set_cell(5, c, Cell.with_chest(ChestType.VIBRANIUM))
        board.set_cell(0, c, Cell.with_chest(ChestType.VIBRANIUM))
    with pytest.raises(RuntimeError):
        random_placement(board, ChestType.BRONZE, V, random.Random(0), max_attempts=50)
