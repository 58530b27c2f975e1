"""Two-sided game orchestration for the treasure hunt.

A match runs through four phases:

PLACING_USER   The human places each chest type exactly once.
PLACING_AI     The random opponent places its five chests.
DIGGING        Rounds of one human dig on the AI board followed, while the AI
               board still holds undug chests, by one AI dig on the user board.
FINISHED       One board has no undug chest cells left.

Whether the match is over is only decided between rounds, and the human always
digs first in a round.  A human dig that clears the AI board therefore ends the
match before the AI gets its dig, whereas the AI can clear the user board only
after the human has already dug in that round.

The loop can be driven in one call with :meth:`GameLoop.run` and a
:class:`PlayerInput`, or step by step through :meth:`place_user_chest`,
:meth:`place_ai_chests` and :meth:`play_round`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence

from .board import Board, ChestType, Coord, OutOfBounds
from .bot_logic import RandomOpponent
from .dig import DigOutcome, ProgressCounters, dig
from .events import Category, Event
from .placement import ChestPlacement, Overlap, place_chest

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLACING_USER = "placing_user"
    PLACING_AI = "placing_ai"
    DIGGING = "digging"
    FINISHED = "finished"


class Side(Enum):
    USER = "user"
    AI = "ai"


@dataclass
class Player:
    """One side's own board plus its tally of pieces found on the other board."""

    side: Side
    board: Board = field(default_factory=Board)
    found: ProgressCounters = field(default_factory=ProgressCounters)


@dataclass(frozen=True)
class RoundResult:
    user_coord: Coord
    user: DigOutcome
    ai_coord: Optional[Coord] = None
    ai: Optional[DigOutcome] = None


class PlayerInput(Protocol):
    """What the loop needs from whoever controls the human side."""

    def choose_placement(self, board: Board, remaining: Sequence[ChestType]) -> ChestPlacement:
        ...

    def choose_dig(self, own_board: Board, opponent_board: Board) -> Coord:
        ...


class GameLoop:
    def __init__(self, opponent: Optional[RandomOpponent] = None, *, seed: Optional[int] = None) -> None:
        self.user = Player(Side.USER)
        self.ai = Player(Side.AI)
        self.opponent = opponent if opponent is not None else RandomOpponent(seed=seed)
        self.phase = Phase.PLACING_USER
        self.winner: Optional[Side] = None
        self.rounds = 0
        self._remaining: List[ChestType] = list(ChestType)
        self._subs: List[Callable[[Event], None]] = []

    # -------------------- event bus --------------------
    def subscribe(self, cb: Callable[[Event], None]) -> None:
        """Allow external components (console/logger) to receive game events."""
        self._subs.append(cb)

    def _emit(self, ev: Event) -> None:
        for cb in tuple(self._subs):
            try:
                cb(ev)
            except Exception:
                # A misbehaving subscriber must not break the match
                logger.exception("event subscriber failed on %s", ev.type)

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        self._emit(Event(Category.SYSTEM, "phase", {"phase": phase}))

    def _require(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise RuntimeError(f"expected phase {phase.value}, game is in {self.phase.value}")

    # -------------------- placement --------------------
    @property
    def remaining_chests(self) -> List[ChestType]:
        """Chest types the human still has to place."""
        return list(self._remaining)

    @property
    def chests_remaining(self) -> int:
        return len(self._remaining)

    def place_user_chest(self, placement: ChestPlacement) -> bool:
        """Try to put one of the human's chests down; False if it does not fit."""
        self._require(Phase.PLACING_USER)
        chest = ChestType(placement.chest)
        if chest not in self._remaining:
            raise ValueError(f"{chest.display_name} chest has already been placed")
        try:
            cells = place_chest(self.user.board, placement)
        except (OutOfBounds, Overlap) as e:
            logger.debug("user placement rejected – %s", e)
            self._emit(
                Event(Category.PLACEMENT, "placement_rejected", {"side": Side.USER, "placement": placement, "error": e})
            )
            return False
        self._remaining.remove(chest)
        self._emit(Event(Category.PLACEMENT, "placed", {"side": Side.USER, "placement": placement, "cells": cells}))
        if not self._remaining:
            self._set_phase(Phase.PLACING_AI)
        return True

    def place_ai_chests(self) -> List[ChestPlacement]:
        self._require(Phase.PLACING_AI)
        placements = self.opponent.place_all(self.ai.board)
        for placement in placements:
            self._emit(Event(Category.PLACEMENT, "placed", {"side": Side.AI, "placement": placement}))
        self._set_phase(Phase.DIGGING)
        return placements

    # -------------------- digging --------------------
    def _dig(self, digger: Player, target: Player, coord: Coord) -> DigOutcome:
        outcome = dig(target.board, digger.found, *coord)
        self._emit(Event(Category.DIG, "dig", {"side": digger.side, "coord": coord, "outcome": outcome}))
        if outcome.completed is not None:
            logger.info(
                "%s uncovered the whole %s chest", digger.side.value, outcome.completed.chest.display_name
            )
            self._emit(
                Event(
                    Category.DIG,
                    "chest_found",
                    {"side": digger.side, "chest": outcome.completed.chest, "length": outcome.completed.length},
                )
            )
        return outcome

    def play_round(self, row: int, col: int) -> RoundResult:
        """One human dig on the AI board, then one AI dig if the AI board still has chests.

        Raises OutOfBounds, before anything changes, when (*row*, *col*) is off
        the board.
        """
        self._require(Phase.DIGGING)
        user_outcome = self._dig(self.user, self.ai, (row, col))
        ai_coord = ai_outcome = None
        if self.ai.board.has_remaining_chests():
            ai_coord = self.opponent.choose_dig(self.user.board)
            ai_outcome = self._dig(self.ai, self.user, ai_coord)
        self.rounds += 1
        if not (self.user.board.has_remaining_chests() and self.ai.board.has_remaining_chests()):
            self.finish()
        return RoundResult((row, col), user_outcome, ai_coord, ai_outcome)

    def finish(self) -> Side:
        """Decide the winner.  A cleared user board means the AI won, checked first."""
        self._require(Phase.DIGGING)
        self.winner = Side.AI if not self.user.board.has_remaining_chests() else Side.USER
        logger.info("game over after %d round(s) – %s wins", self.rounds, self.winner.value)
        self._set_phase(Phase.FINISHED)
        self._emit(Event(Category.SYSTEM, "end", {"winner": self.winner, "rounds": self.rounds}))
        return self.winner

    # -------------------- full match --------------------
    def run(self, player: PlayerInput) -> Side:
        """Play a whole match with *player* on the human side and return the winner."""
        while self.phase is Phase.PLACING_USER:
            placement = player.choose_placement(self.user.board, self.remaining_chests)
            self.place_user_chest(placement)
        self.place_ai_chests()
        while self.phase is Phase.DIGGING:
            row, col = player.choose_dig(self.user.board, self.ai.board)
            try:
                self.play_round(row, col)
            except OutOfBounds as e:
                logger.debug("user dig rejected – %s", e)
                self._emit(Event(Category.DIG, "dig_rejected", {"side": Side.USER, "coord": (row, col), "error": e}))
        assert self.winner is not None
        return self.winner

