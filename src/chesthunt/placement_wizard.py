# placement_wizard.py
"""
Interactive chest-placement prompts over plain callables.
Usage:
    placement = ask_placement(recv_fn, notify, remaining)
recv_fn() returns one line of input ("" on end of input); notify(text) shows
text to the player.  Every field is re-asked until it parses; whether the
chest actually fits is decided afterwards by the game.
"""

from typing import Callable, Sequence, TypeVar

from .board import ChestType
from .commands import CommandParseError, parse_chest_type, parse_int, parse_orientation
from .placement import ChestPlacement

T = TypeVar("T")


class PlacementAborted(Exception):
    """Raised when input runs out before a chest could be placed."""

    pass


def ask(
    prompt: str,
    parse: Callable[[str], T],
    recv_fn: Callable[[], str],
    notify: Callable[[str], None],
    error: str,
) -> T:
    """Prompt until *parse* accepts the answer."""
    while True:
        notify(prompt)
        line = recv_fn()
        if not line:
            raise PlacementAborted("input closed during chest placement")
        try:
            return parse(line)
        except CommandParseError:
            notify(error)


def _chest_prompt(remaining: Sequence[ChestType]) -> str:
    options = ", ".join(f"'{c.value}' for {c.display_name}" for c in remaining)
    return f"What type of chest do you want to place? Enter {options}: "


def ask_placement(
    recv_fn: Callable[[], str],
    notify: Callable[[str], None],
    remaining: Sequence[ChestType],
) -> ChestPlacement:
    low, high = min(remaining).value, max(remaining).value

    def parse_remaining(line: str) -> ChestType:
        chest = parse_chest_type(line)
        if chest not in remaining:
            raise CommandParseError(f"{chest.display_name} chest already placed")
        return chest

    chest = ask(
        _chest_prompt(remaining),
        parse_remaining,
        recv_fn,
        notify,
        f"Your input is invalid! You should enter one of the chests you have left ({low}-{high})! Try again!",
    )
    orientation = ask(
        "Do you want to place the chest horizontally or vertically? Enter 0 for horizontal, 1 for vertical: ",
        parse_orientation,
        recv_fn,
        notify,
        "Your input is invalid! You should enter a positive integer between 0 and 1! Try again!",
    )
    row = ask(
        "Which row do you want to place the chest? ",
        parse_int,
        recv_fn,
        notify,
        "Your input is invalid! You should enter a positive integer! Try again!",
    )
    col = ask(
        "Which column do you want to place the chest? ",
        parse_int,
        recv_fn,
        notify,
        "Your input is invalid! You should enter a positive integer! Try again!",
    )
    return ChestPlacement(row=row, col=col, chest=chest, orientation=orientation)
