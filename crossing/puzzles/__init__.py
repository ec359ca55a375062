"""
Puzzles Package - Ready-made puzzle configurations for the search engine.
"""

from .carrier import (
    ORIGIN,
    DESTINATION,
    PICK_UP,
    PUT_DOWN,
    MOVE_CARRIER,
    NO_UNSAFE_COMBINATION,
    CARRYING_CAPACITY,
    NO_REPEATED_STATE,
    pick_up,
    put_down,
    move_carrier,
    build_crossing_puzzle,
)
from .fox_goose_grain import fox_goose_grain_puzzle

__all__ = [
    "ORIGIN",
    "DESTINATION",
    "PICK_UP",
    "PUT_DOWN",
    "MOVE_CARRIER",
    "NO_UNSAFE_COMBINATION",
    "CARRYING_CAPACITY",
    "NO_REPEATED_STATE",
    "pick_up",
    "put_down",
    "move_carrier",
    "build_crossing_puzzle",
    "fox_goose_grain_puzzle",
]
