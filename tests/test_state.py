"""
Tests for WorldState: lookups, grouping, and immutable moves.
"""

import pytest

from crossing.engine import ConfigurationError, UnknownEntity, WorldState, WITH_CARRIER
from crossing.puzzles import DESTINATION, ORIGIN
from crossing.puzzles.fox_goose_grain import ENTITIES, FARMER, FOX, GOOSE, GRAIN


def test_location_of_is_total(initial):
    for entity in ENTITIES:
        assert initial.location_of(entity) == ORIGIN


def test_location_of_unknown_entity(initial):
    with pytest.raises(UnknownEntity):
        initial.location_of("wolf")
    # Also usable as a KeyError by dict-minded callers
    with pytest.raises(KeyError):
        initial.location_of("wolf")


def test_together(initial):
    assert initial.together([FOX, GOOSE]) == ORIGIN
    assert initial.together([GRAIN]) == ORIGIN

    split = initial.move(GOOSE, DESTINATION)
    assert split.together([FOX, GOOSE]) is None
    assert split.together([GOOSE]) == DESTINATION


def test_together_needs_entities(initial):
    with pytest.raises(ValueError):
        initial.together([])


def test_is_with_carrier(initial):
    assert initial.is_with_carrier(FOX)
    assert initial.is_with_carrier(FARMER)

    crossed = initial.move(FARMER, DESTINATION)
    assert not crossed.is_with_carrier(FOX)
    assert crossed.carrier_location == DESTINATION


def test_entities_at_keeps_entity_order(initial):
    state = initial.move(GRAIN, DESTINATION).move(FOX, DESTINATION)
    assert state.entities_at(DESTINATION) == (FOX, GRAIN)
    assert state.entities_at(ORIGIN) == (GOOSE, FARMER)
    assert state.entities_at(WITH_CARRIER) == ()


def test_move_changes_only_one_entity(initial):
    moved = initial.move(GOOSE, WITH_CARRIER)

    assert moved.location_of(GOOSE) == WITH_CARRIER
    for entity in (FOX, GRAIN, FARMER):
        assert moved.location_of(entity) == initial.location_of(entity)
    # Original untouched
    assert initial.location_of(GOOSE) == ORIGIN


def test_move_unknown_entity(initial):
    with pytest.raises(UnknownEntity):
        initial.move("wolf", DESTINATION)


def test_structural_equality(initial):
    roundabout = initial.move(GOOSE, DESTINATION).move(GOOSE, ORIGIN)
    assert roundabout == initial
    assert hash(roundabout) == hash(initial)

    rebuilt = WorldState.from_mapping(initial.as_dict(), FARMER)
    assert rebuilt == initial
    assert len({initial, roundabout, rebuilt}) == 1


def test_from_mapping_requires_carrier():
    with pytest.raises(UnknownEntity):
        WorldState.from_mapping({FOX: ORIGIN}, FARMER)


def test_from_mapping_order_must_include_carrier():
    with pytest.raises(ConfigurationError):
        WorldState.from_mapping({FOX: ORIGIN, FARMER: ORIGIN}, FARMER, order=(FOX,))
