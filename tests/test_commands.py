import pytest

from chesthunt.board import ChestType
from chesthunt.commands import (
    CommandParseError,
    DigCommand,
    parse_chest_type,
    parse_dig,
    parse_int,
    parse_orientation,
)
from chesthunt.placement import Orientation


def test_parse_int() -> None:
    assert parse_int(" 7\n") == 7
    assert parse_int("-2") == -2


@pytest.mark.parametrize("line", ["", "   ", "seven", "1.5", "3 4"])
def test_parse_int_rejects(line: str) -> None:
    with pytest.raises(CommandParseError):
        parse_int(line)


def test_parse_chest_type() -> None:
    assert parse_chest_type("11") is ChestType.BRONZE
    assert parse_chest_type("15\n") is ChestType.VIBRANIUM
    for bad in ("10", "16", "gold"):
        with pytest.raises(CommandParseError):
            parse_chest_type(bad)


@pytest.mark.parametrize(
    "line, expected",
    [("0", Orientation.HORIZONTAL), ("h", Orientation.HORIZONTAL), ("1", Orientation.VERTICAL), ("V", Orientation.VERTICAL)],
)
def test_parse_orientation(line: str, expected: Orientation) -> None:
    assert parse_orientation(line) is expected


def test_parse_orientation_rejects_other_numbers() -> None:
    with pytest.raises(CommandParseError):
        parse_orientation("9")


@pytest.mark.parametrize("line", ["3 4", "3,4", " 3 ,  4 \n", "3\t4"])
def test_parse_dig(line: str) -> None:
    assert parse_dig(line) == DigCommand(row=3, col=4)


@pytest.mark.parametrize("line", ["34", "3", "a b", "3 4 5"])
def test_parse_dig_rejects(line: str) -> None:
    with pytest.raises(CommandParseError):
        parse_dig(line)


def test_parse_dig_leaves_range_checks_to_the_board() -> None:
    assert parse_dig("-1 12") == DigCommand(row=-1, col=12)
