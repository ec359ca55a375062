"""
Tests for action kinds and the action registry.
"""

import pytest

from crossing.engine import (
    ActionInstance,
    ActionKind,
    ActionRegistry,
    MalformedAction,
    WorldState,
    WITH_CARRIER,
)
from crossing.puzzles import (
    DESTINATION,
    MOVE_CARRIER,
    ORIGIN,
    PICK_UP,
    PUT_DOWN,
    move_carrier,
)
from crossing.puzzles.fox_goose_grain import FARMER, FOX, GOOSE, GRAIN


def test_all_instances_order(puzzle):
    instances = puzzle.actions.all_instances()
    assert instances == (
        ActionInstance(PICK_UP, FOX),
        ActionInstance(PICK_UP, GOOSE),
        ActionInstance(PICK_UP, GRAIN),
        ActionInstance(PUT_DOWN, FOX),
        ActionInstance(PUT_DOWN, GOOSE),
        ActionInstance(PUT_DOWN, GRAIN),
        ActionInstance(MOVE_CARRIER),
    )


def test_carrier_is_not_movable(puzzle):
    pick_up = puzzle.actions.get(PICK_UP)
    assert FARMER not in pick_up.domain
    with pytest.raises(MalformedAction):
        puzzle.actions.is_allowed(puzzle.initial_state, ActionInstance(PICK_UP, FARMER))


def test_pick_up(puzzle, initial):
    action = ActionInstance(PICK_UP, GOOSE)
    assert puzzle.actions.is_allowed(initial, action)

    state = puzzle.actions.apply(initial, action)
    assert state.location_of(GOOSE) == WITH_CARRIER

    across = initial.move(FARMER, DESTINATION)
    assert not puzzle.actions.is_allowed(across, action)


def test_put_down(puzzle, initial):
    action = ActionInstance(PUT_DOWN, GOOSE)
    assert not puzzle.actions.is_allowed(initial, action)

    carried = initial.move(GOOSE, WITH_CARRIER).move(FARMER, DESTINATION)
    assert puzzle.actions.is_allowed(carried, action)
    assert puzzle.actions.apply(carried, action).location_of(GOOSE) == DESTINATION


def test_move_carrier_crosses(puzzle, initial):
    action = ActionInstance(MOVE_CARRIER)
    assert puzzle.actions.is_allowed(initial, action)

    there = puzzle.actions.apply(initial, action)
    assert there.carrier_location == DESTINATION
    back = puzzle.actions.apply(there, action)
    assert back == initial


def test_carried_entity_travels_with_carrier(puzzle, initial):
    state = puzzle.actions.apply(initial, ActionInstance(PICK_UP, FOX))
    state = puzzle.actions.apply(state, ActionInstance(MOVE_CARRIER))
    state = puzzle.actions.apply(state, ActionInstance(PUT_DOWN, FOX))
    assert state.location_of(FOX) == DESTINATION


def test_unknown_kind(puzzle, initial):
    with pytest.raises(MalformedAction):
        puzzle.actions.apply(initial, ActionInstance("row-boat"))


def test_argument_outside_domain(puzzle, initial):
    with pytest.raises(MalformedAction):
        puzzle.actions.apply(initial, ActionInstance(PUT_DOWN, "wolf"))
    with pytest.raises(MalformedAction):
        puzzle.actions.is_allowed(initial, ActionInstance(MOVE_CARRIER, DESTINATION))


def test_duplicate_kind_rejected():
    kind = ActionKind("noop", (None,), lambda s, a: True, lambda s, a: s)
    registry = ActionRegistry([kind])
    with pytest.raises(ValueError):
        registry.register(kind)
    assert "noop" in registry
    assert len(registry) == 1


def test_move_carrier_with_adjacency():
    kind = move_carrier(
        ("left", "island", "right"),
        adjacency={"left": ["island"], "island": ["left", "right"], "right": ["island"]},
    )
    registry = ActionRegistry([kind])
    state = WorldState.uniform(("boat",), "boat", "left")

    allowed = [
        instance.argument for instance in registry.all_instances()
        if registry.is_allowed(state, instance)
    ]
    assert allowed == ["island"]

    on_island = registry.apply(state, ActionInstance(MOVE_CARRIER, "island"))
    allowed = [
        instance.argument for instance in registry.all_instances()
        if registry.is_allowed(on_island, instance)
    ]
    assert allowed == ["left", "right"]


def test_move_carrier_default_fully_connected():
    kind = move_carrier((ORIGIN, "island", DESTINATION))
    registry = ActionRegistry([kind])
    state = WorldState.uniform(("boat",), "boat", ORIGIN)

    allowed = [
        instance.argument for instance in registry.all_instances()
        if registry.is_allowed(state, instance)
    ]
    assert allowed == ["island", DESTINATION]
