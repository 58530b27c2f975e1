"""Console front-end: stdin/stdout player for the human side of a GameLoop."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from . import config as _cfg
from .board import Board, ChestType, Coord
from .commands import CommandParseError, parse_dig
from .dig import DigResult
from .events import Event
from .game import GameLoop, Phase, Side
from .placement import ChestPlacement
from .placement_wizard import PlacementAborted, ask_placement
from .render import print_board

logger = logging.getLogger(__name__)

DIG_PROMPT = "Please choose a row and a column location to dig: "
INVALID_DIG = "The value you input is invalid! Try Again!"


class InputClosed(Exception):
    """Raised when stdin reaches end of file mid-game."""


def _banner(text: str) -> str:
    return f"\n{'_' * 20}{text}{'_' * 20}"


class ConsolePlayer:
    """Reads the human's choices from a text stream and echoes prompts to stdout."""

    def __init__(
        self,
        stream: TextIO,
        *,
        notify: Callable[[str], None] = print,
        header: bool = False,
    ) -> None:
        self.stream = stream
        self.notify = notify
        self.header = header

    def _readline(self) -> str:
        return self.stream.readline()

    def _prompt(self, text: str) -> None:
        # Prompts ending in a space expect the answer on the same line
        if text.endswith(" "):
            print(text, end="", flush=True)
        else:
            self.notify(text)

    def choose_placement(self, board: Board, remaining: Sequence[ChestType]) -> ChestPlacement:
        self.notify(f"You have {len(remaining)} chests to place!\n")
        print_board(board, reveal=True, header=self.header)
        return ask_placement(self._readline, self._prompt, remaining)

    def choose_dig(self, own_board: Board, opponent_board: Board) -> Coord:
        while True:
            print_board(own_board, reveal=True, title="User Board", header=self.header)
            print_board(opponent_board, title="AI Board", header=self.header)
            self._prompt(DIG_PROMPT)
            line = self._readline()
            if not line:
                raise InputClosed("input closed while digging")
            try:
                cmd = parse_dig(line)
            except CommandParseError as e:
                logger.debug("bad dig input %r – %s", line, e)
                self.notify(INVALID_DIG)
                continue
            return cmd.row, cmd.col


def build_router(notify: Callable[[str], None] = print) -> Callable[[Event], None]:
    """Return a GameLoop subscriber that prints the console message for each event."""

    def h_placed(ev: Event) -> None:
        notify("Chest placed successfully!")

    def h_rejected(ev: Event) -> None:
        notify("Failed to place chest. Check to see if you have entered valid values! ")

    def h_phase(ev: Event) -> None:
        if ev.payload["phase"] is Phase.PLACING_AI:
            notify(_banner("Placing Chests (AI) "))

    def h_dig(ev: Event) -> None:
        if ev.payload["outcome"].result is DigResult.ALREADY_DUG:
            msg = "You've already dug here!"
            notify(msg if ev.payload["side"] is Side.USER else f"AI: {msg}")

    def h_dig_rejected(ev: Event) -> None:
        notify(INVALID_DIG)

    def h_chest_found(ev: Event) -> None:
        msg = f"All parts of a {ev.payload['length']}-sized chest have been dug up!"
        notify(msg if ev.payload["side"] is Side.USER else f"AI: {msg}")

    def h_end(ev: Event) -> None:
        notify(f"All treasures found! {'AI' if ev.payload['winner'] is Side.AI else 'User'} wins!")

    handlers: Dict[str, Callable[[Event], None]] = {
        "placed": h_placed,
        "placement_rejected": h_rejected,
        "phase": h_phase,
        "dig": h_dig,
        "dig_rejected": h_dig_rejected,
        "chest_found": h_chest_found,
        "end": h_end,
    }

    def route(ev: Event) -> None:
        if ev.type in handlers:
            handlers[ev.type](ev)
        else:
            logger.debug("no console message for event %s", ev.type)

    return route


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Treasure hunt: find the AI's chests before it finds yours")
    parser.add_argument("--seed", type=int, default=_cfg.SEED, help="Seed for the AI's random choices.")
    parser.add_argument("--debug", action="store_true", default=_cfg.DEBUG, help="Enable debug logging.")
    parser.add_argument("--header", action="store_true", help="Show row/column indices around boards.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("starting game – seed=%r", args.seed)

    game = GameLoop(seed=args.seed)
    game.subscribe(build_router())
    player = ConsolePlayer(sys.stdin, header=args.header)

    print(_banner("Placing Chests (User) "))
    try:
        game.run(player)
    except (PlacementAborted, InputClosed) as e:
        logger.info("game abandoned – %s", e)
        print("\nInput closed – game abandoned.")
        return 1

    print_board(game.user.board, reveal=True, title="User Board", header=args.header)
    print_board(game.ai.board, reveal=True, title="AI Board", header=args.header)
    return 0


if __name__ == "__main__":
    sys.exit(main())
