"""Lightweight event model used by GameLoop to decouple game logic from the console.

The loop emits typed events that a presentation layer (or a logger) can
consume without parsing free-text strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class Category(Enum):
    """High-level event categories."""

    PLACEMENT = auto()  # chest placed during setup
    DIG = auto()  # per-dig lifecycle (dig, chest_found)
    SYSTEM = auto()  # phase changes, end of game


@dataclass(slots=True)
class Event:
    """Immutable event emitted by GameLoop."""

    category: Category
    type: str  # finer-grained identifier, e.g. "dig", "chest_found", "end"
    payload: Dict[str, Any]

