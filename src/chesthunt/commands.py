import re
from dataclasses import dataclass

from .board import ChestType
from .placement import Orientation

# One signed integer, or two separated by whitespace or a comma
INT_RE = re.compile(r"^[+-]?\d+$")
COORD_RE = re.compile(r"^([+-]?\d+)\s*[,\s]\s*([+-]?\d+)$")


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as the expected answer."""


@dataclass(frozen=True)
class DigCommand:
    row: int
    col: int


def _clean(line: str) -> str:
    if line is None:
        raise CommandParseError("No input to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty input")
    return raw


def parse_int(line: str) -> int:
    raw = _clean(line)
    if not INT_RE.match(raw):
        raise CommandParseError(f"Not an integer: {raw}")
    return int(raw)


def parse_chest_type(line: str) -> ChestType:
    code = parse_int(line)
    try:
        return ChestType(code)
    except ValueError:
        raise CommandParseError(
            f"Chest type must be between {min(ChestType).value} and {max(ChestType).value}"
        ) from None


def parse_orientation(line: str) -> Orientation:
    """Accept 0/1 or H/V."""
    raw = _clean(line).upper()
    if raw in ("0", "H"):
        return Orientation.HORIZONTAL
    if raw in ("1", "V"):
        return Orientation.VERTICAL
    raise CommandParseError("Orientation must be 0 (horizontal) or 1 (vertical)")


def parse_dig(line: str) -> DigCommand:
    raw = _clean(line)
    m = COORD_RE.match(raw)
    if not m:
        raise CommandParseError(f"Expected '<row> <col>', got: {raw}")
    return DigCommand(row=int(m.group(1)), col=int(m.group(2)))

