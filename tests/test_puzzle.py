"""
Tests for puzzle configuration validation and the goal test.
"""

import pytest

from crossing.engine import (
    ConfigurationError,
    PuzzleConfig,
    UnknownEntity,
    UnknownLocation,
    WorldState,
    WITH_CARRIER,
)
from crossing.puzzles import DESTINATION, ORIGIN, build_crossing_puzzle
from crossing.puzzles.fox_goose_grain import (
    ENTITIES,
    FARMER,
    FOX,
    GOOSE,
    GRAIN,
    UNSAFE_COMBINATIONS,
)


def test_reference_configuration(puzzle):
    assert puzzle.entities == ENTITIES
    assert puzzle.movable_entities == (FOX, GOOSE, GRAIN)
    assert puzzle.locations == (ORIGIN, DESTINATION)
    assert puzzle.all_locations == (ORIGIN, DESTINATION, WITH_CARRIER)
    assert puzzle.capacity == 1
    assert puzzle.initial_state == WorldState.uniform(ENTITIES, FARMER, ORIGIN)


def test_goal_test(puzzle, initial):
    assert not puzzle.is_complete(initial)

    done = WorldState.uniform(ENTITIES, FARMER, DESTINATION)
    assert puzzle.is_complete(done)
    assert not puzzle.is_complete(done.move(GOOSE, WITH_CARRIER))
    # The carrier has to arrive too
    assert not puzzle.is_complete(done.move(FARMER, ORIGIN))


def test_unknown_carrier():
    with pytest.raises(UnknownEntity):
        build_crossing_puzzle(entities=(FOX, GOOSE), carrier=FARMER)


def test_unknown_entity_in_unsafe_combination():
    with pytest.raises(UnknownEntity):
        build_crossing_puzzle(
            entities=ENTITIES, carrier=FARMER,
            unsafe_combinations=UNSAFE_COMBINATIONS + (("wolf", GOOSE),),
        )


def test_unknown_origin():
    with pytest.raises(UnknownLocation):
        PuzzleConfig(
            entities=ENTITIES, locations=(ORIGIN, DESTINATION),
            carrier=FARMER, origin="moon", destination=DESTINATION,
        )


def test_unknown_location_in_initial_state():
    start = WorldState.uniform(ENTITIES, FARMER, ORIGIN).move(FOX, "moon")
    with pytest.raises(UnknownLocation):
        build_crossing_puzzle(entities=ENTITIES, carrier=FARMER, initial_state=start)


def test_unknown_location_in_adjacency():
    with pytest.raises(UnknownLocation):
        build_crossing_puzzle(
            entities=ENTITIES, carrier=FARMER,
            locations=(ORIGIN, "island", DESTINATION),
            adjacency={ORIGIN: ["island"], "island": ["moon"]},
        )


def test_reserved_location_rejected():
    with pytest.raises(ConfigurationError):
        build_crossing_puzzle(
            entities=ENTITIES, carrier=FARMER, locations=(ORIGIN, WITH_CARRIER),
        )


def test_empty_locations_rejected():
    with pytest.raises(ConfigurationError):
        build_crossing_puzzle(entities=(FARMER,), carrier=FARMER, locations=())
    with pytest.raises(ConfigurationError):
        PuzzleConfig(
            entities=(FARMER,), locations=(),
            carrier=FARMER, origin=ORIGIN, destination=DESTINATION,
        )


def test_duplicate_entities_rejected():
    with pytest.raises(ConfigurationError):
        build_crossing_puzzle(entities=(FOX, FOX, FARMER), carrier=FARMER)


def test_carrier_cannot_start_carried():
    start = WorldState.uniform(ENTITIES, FARMER, ORIGIN).move(FARMER, WITH_CARRIER)
    with pytest.raises(ConfigurationError):
        build_crossing_puzzle(entities=ENTITIES, carrier=FARMER, initial_state=start)


def test_initial_state_missing_entity():
    start = WorldState.uniform((FOX, FARMER), FARMER, ORIGIN)
    with pytest.raises(ConfigurationError):
        build_crossing_puzzle(entities=ENTITIES, carrier=FARMER, initial_state=start)


def test_initial_state_order_normalized():
    start = WorldState.uniform(tuple(reversed(ENTITIES)), FARMER, ORIGIN)
    puzzle = build_crossing_puzzle(entities=ENTITIES, carrier=FARMER, initial_state=start)
    assert puzzle.initial_state.entities == ENTITIES
    assert puzzle.initial_state == WorldState.uniform(ENTITIES, FARMER, ORIGIN)
