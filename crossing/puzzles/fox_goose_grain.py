"""
Fox, Goose and Bag of Grain - The classic crossing puzzle as configuration.

A farmer must bring a fox, a goose and a bag of grain across a river.
The farmer can carry one of them at a time. Left alone, the fox eats the
goose and the goose eats the grain.
"""

from crossing.engine import PuzzleConfig

from .carrier import DESTINATION, ORIGIN, build_crossing_puzzle

FOX = "fox"
GOOSE = "goose"
GRAIN = "grain"
FARMER = "farmer"

ENTITIES = (FOX, GOOSE, GRAIN, FARMER)

UNSAFE_COMBINATIONS = (
    (FOX, GOOSE),
    (GOOSE, GRAIN),
)


def fox_goose_grain_puzzle(capacity: int = 1) -> PuzzleConfig:
    """Reference puzzle: everything starts at the origin bank."""
    return build_crossing_puzzle(
        entities=ENTITIES,
        carrier=FARMER,
        unsafe_combinations=UNSAFE_COMBINATIONS,
        locations=(ORIGIN, DESTINATION),
        capacity=capacity,
    )
