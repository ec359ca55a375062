"""
Carrier Puzzles Module - Standard actions and rules for carrier-based crossings.

A carrier picks entities up, moves between locations and puts them down.
Being carried is the WITH_CARRIER location, so the carrier itself never
needs a boat: wherever the carrier is, its load is.
"""

import logging
from typing import Dict, Iterable, Optional, Sequence, Tuple

from crossing.engine import (
    ActionInstance,
    ActionKind,
    ActionRegistry,
    ConfigurationError,
    PuzzleConfig,
    UnknownLocation,
    WorldState,
    WITH_CARRIER,
)
from crossing.engine.invariants import (
    CARRYING_CAPACITY,
    NO_REPEATED_STATE,
    NO_UNSAFE_COMBINATION,
)

logger = logging.getLogger(__name__)

ORIGIN = "origin"
DESTINATION = "destination"

# Action kind names
PICK_UP = "pick-up"
PUT_DOWN = "put-down"
MOVE_CARRIER = "move-carrier"


def pick_up(movable: Sequence[str]) -> ActionKind:
    """Pick up an entity that shares the carrier's location."""

    def precondition(state: WorldState, action: ActionInstance) -> bool:
        return state.is_with_carrier(action.argument)

    def effect(state: WorldState, action: ActionInstance) -> WorldState:
        return state.move(action.argument, WITH_CARRIER)

    return ActionKind(PICK_UP, tuple(movable), precondition, effect)


def put_down(movable: Sequence[str]) -> ActionKind:
    """Put a carried entity down at the carrier's location."""

    def precondition(state: WorldState, action: ActionInstance) -> bool:
        return state.is_at(action.argument, WITH_CARRIER)

    def effect(state: WorldState, action: ActionInstance) -> WorldState:
        return state.move(action.argument, state.carrier_location)

    return ActionKind(PUT_DOWN, tuple(movable), precondition, effect)


def move_carrier(locations: Sequence[str],
                 adjacency: Optional[Dict[str, Iterable[str]]] = None) -> ActionKind:
    """
    Move the carrier (and everything it carries) to another location.

    With exactly two locations and no adjacency table this is a nullary
    action that crosses to the opposite side. Otherwise the argument is the
    target location, which must be adjacent to the carrier's location.

    Args:
        locations: Ordinary locations
        adjacency: Optional location -> reachable locations table
                   (default: every location reaches every other)

    Returns:
        ActionKind for move-carrier
    """
    locations = tuple(locations)

    if len(locations) == 2 and adjacency is None:
        first, second = locations

        def cross(state: WorldState, action: ActionInstance) -> WorldState:
            here = state.carrier_location
            return state.move(state.carrier, second if here == first else first)

        return ActionKind(MOVE_CARRIER, (None,), lambda state, action: True, cross)

    reachable: Dict[str, Tuple[str, ...]] = {}
    for location in locations:
        if adjacency is None:
            reachable[location] = tuple(l for l in locations if l != location)
        else:
            reachable[location] = tuple(adjacency.get(location, ()))

    def precondition(state: WorldState, action: ActionInstance) -> bool:
        here = state.carrier_location
        return action.argument != here and action.argument in reachable.get(here, ())

    def effect(state: WorldState, action: ActionInstance) -> WorldState:
        return state.move(state.carrier, action.argument)

    return ActionKind(MOVE_CARRIER, locations, precondition, effect)


def build_crossing_puzzle(
    entities: Sequence[str],
    carrier: str,
    unsafe_combinations: Iterable[Iterable[str]] = (),
    locations: Sequence[str] = (ORIGIN, DESTINATION),
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    capacity: int = 1,
    adjacency: Optional[Dict[str, Iterable[str]]] = None,
    initial_state: Optional[WorldState] = None,
) -> PuzzleConfig:
    """
    Wire a carrier puzzle with the standard actions.

    The standard invariants come from PuzzleConfig itself, derived from
    unsafe_combinations and capacity.

    Args:
        entities: All entities, carrier included, in fixed order
        carrier: The carrier entity
        unsafe_combinations: Groups that must never be left unsupervised
        locations: Ordinary locations
        origin: Start location (default: first location)
        destination: Goal location (default: last location)
        capacity: Entities the carrier can hold at once
        adjacency: Optional movement table for more than two locations
        initial_state: Optional start state (default: everything at origin)

    Returns:
        Validated PuzzleConfig

    Raises:
        UnknownEntity / UnknownLocation: For identifiers outside their sets
    """
    entities = tuple(entities)
    locations = tuple(locations)
    unsafe = tuple(tuple(combo) for combo in unsafe_combinations)
    if not locations:
        raise ConfigurationError("Puzzle needs at least one location")
    origin = origin if origin is not None else locations[0]
    destination = destination if destination is not None else locations[-1]

    if adjacency is not None:
        for source, targets in adjacency.items():
            for location in (source, *targets):
                if location not in locations:
                    raise UnknownLocation(location)

    movable = tuple(entity for entity in entities if entity != carrier)

    actions = ActionRegistry([
        pick_up(movable),
        put_down(movable),
        move_carrier(locations, adjacency),
    ])

    logger.debug(
        f"Building crossing puzzle: carrier={carrier}, movable={list(movable)}, "
        f"{len(unsafe)} unsafe combinations, capacity={capacity}"
    )

    return PuzzleConfig(
        entities=entities,
        locations=locations,
        carrier=carrier,
        origin=origin,
        destination=destination,
        unsafe_combinations=unsafe,
        capacity=capacity,
        actions=actions,
        initial_state=initial_state,
    )
