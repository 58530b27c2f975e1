"""Central configuration for runtime-tunable parameters.

Only the knobs that do not change the rules of the game can be overridden via
environment variables.  Board dimensions and the chest roster are fixed.
"""

from __future__ import annotations

import os

# ===========================================================================
# Debugging and Logging
# ===========================================================================
# CHESTHUNT_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).  Can also be set via the `--debug` CLI flag.
#   Example: export CHESTHUNT_DEBUG=1
DEBUG: bool = os.getenv("CHESTHUNT_DEBUG", "0") == "1"


# ===========================================================================
# Opponent Randomness
# ===========================================================================
# CHESTHUNT_SEED: Integer seed for the AI opponent's random number generator.
#   Unset (the default) means a fresh, nondeterministic seed every game.
#   Example: export CHESTHUNT_SEED=42
SEED: int | None = int(os.environ["CHESTHUNT_SEED"]) if os.getenv("CHESTHUNT_SEED") else None

# CHESTHUNT_AI_MAX_ATTEMPTS: Upper bound on random coordinates the AI tries for a
#   single chest before giving up with RuntimeError.  A legal 10x10 board with
#   five chests is never close to this limit.
#   Defaults to 10000.
AI_MAX_ATTEMPTS: int = int(os.getenv("CHESTHUNT_AI_MAX_ATTEMPTS", "10000"))


# ===========================================================================
# Game Constants
# ===========================================================================
# The board is always 10x10; not overridable.
ROWS: int = 10
COLS: int = 10

# Chest roster: code -> display name.  A chest's length is 16 - code.
CHEST_NAMES = {
    11: "bronze",
    12: "silver",
    13: "gold",
    14: "rubies",
    15: "vibranium",
}
