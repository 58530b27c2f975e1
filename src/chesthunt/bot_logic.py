from __future__ import annotations

import logging
import random
from typing import List, Optional

from .board import Board, ChestType, Coord
from .placement import ChestPlacement, Orientation, random_placement

logger = logging.getLogger(__name__)


class RandomOpponent:
    """
    The AI side of the game.  It has no strategy at all:

    1. Placement: every chest type once, each with a coin-flip orientation
       and a uniformly random origin, resampled until it fits.
    2. Digging: a uniformly random in-bounds square every turn.  There is no
       memory of earlier digs, so the same square can come up again.
    """

    def __init__(self, *, seed: Optional[int] = None, rnd: Optional[random.Random] = None) -> None:
        self.rnd = rnd if rnd is not None else random.Random(seed)

    def place_chest(self, board: Board, chest: ChestType) -> ChestPlacement:
        orientation = Orientation(self.rnd.randrange(2))
        placement = random_placement(board, chest, orientation, self.rnd)
        logger.debug("AI placed %s", placement)
        return placement

    def place_all(self, board: Board) -> List[ChestPlacement]:
        return [self.place_chest(board, chest) for chest in ChestType]

    def choose_dig(self, board: Board) -> Coord:
        return self.rnd.randrange(board.rows), self.rnd.randrange(board.cols)
