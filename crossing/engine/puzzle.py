"""
Puzzle Module - Declarative description of one puzzle instance and its goal test.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .action import ActionRegistry
from .errors import ConfigurationError, UnknownEntity, UnknownLocation
from .invariants import (
    BUILTIN_INVARIANTS,
    CARRYING_CAPACITY,
    NO_REPEATED_STATE,
    NO_UNSAFE_COMBINATION,
    InvariantRegistry,
    carrying_capacity,
    no_repeated_state,
    no_unsafe_combination_unsupervised,
)
from .state import WorldState, WITH_CARRIER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Static configuration of a crossing puzzle.

    Identifiers are validated on construction so configuration mistakes
    surface at setup rather than mid-search.

    Attributes:
        entities: All entities in fixed order (carrier included)
        locations: Ordinary locations (WITH_CARRIER is implicit)
        carrier: The entity that moves and carries others
        origin: Where entities start
        destination: Where every entity must end up
        unsafe_combinations: Entity groups that must not be left unsupervised
        capacity: Maximum number of entities carried at once
        actions: Action kinds available to the search
        invariants: State and history rules every path must satisfy. The
            built-in rules are rebuilt from unsafe_combinations and capacity
            on construction; other registered rules are kept after them.
        initial_state: Starting state; defaults to everything at origin
    """
    entities: Tuple[str, ...]
    locations: Tuple[str, ...]
    carrier: str
    origin: str
    destination: str
    unsafe_combinations: Tuple[Tuple[str, ...], ...] = ()
    capacity: int = 1
    actions: ActionRegistry = field(default_factory=ActionRegistry, compare=False)
    invariants: InvariantRegistry = field(default_factory=InvariantRegistry, compare=False)
    initial_state: Optional[WorldState] = None

    def __post_init__(self):
        object.__setattr__(self, "entities", tuple(self.entities))
        object.__setattr__(self, "locations", tuple(self.locations))
        object.__setattr__(
            self, "unsafe_combinations",
            tuple(tuple(combo) for combo in self.unsafe_combinations)
        )
        self._validate_identifiers()

        if self.initial_state is None:
            object.__setattr__(
                self, "initial_state",
                WorldState.uniform(self.entities, self.carrier, self.origin)
            )
        else:
            self._validate_initial_state(self.initial_state)

        self._install_builtin_invariants()

        logger.debug(
            f"Puzzle configured: {len(self.entities)} entities, "
            f"{len(self.locations)} locations, {len(self.actions)} action kinds"
        )

    @property
    def movable_entities(self) -> Tuple[str, ...]:
        """Every entity except the carrier, in fixed order."""
        return tuple(entity for entity in self.entities if entity != self.carrier)

    @property
    def all_locations(self) -> Tuple[str, ...]:
        """Ordinary locations plus the WITH_CARRIER pseudo-location."""
        return self.locations + (WITH_CARRIER,)

    def is_complete(self, state: WorldState) -> bool:
        """
        Goal test: every entity, carrier included, is at the destination.

        Args:
            state: State to test

        Returns:
            True if the puzzle is solved in this state
        """
        return state.together(self.entities) == self.destination

    def _install_builtin_invariants(self) -> None:
        supplied = self.invariants
        registry = InvariantRegistry()
        registry.add_state(
            NO_UNSAFE_COMBINATION,
            no_unsafe_combination_unsupervised(self.unsafe_combinations),
        )
        registry.add_state(CARRYING_CAPACITY, carrying_capacity(self.capacity))
        registry.add_history(NO_REPEATED_STATE, no_repeated_state)

        for invariant in supplied.state_invariants:
            if invariant.name not in BUILTIN_INVARIANTS:
                registry.add_state(invariant.name, invariant.check)
        for invariant in supplied.history_invariants:
            if invariant.name not in BUILTIN_INVARIANTS:
                registry.add_history(invariant.name, invariant.check)

        object.__setattr__(self, "invariants", registry)

    def _validate_identifiers(self) -> None:
        if not self.entities:
            raise ConfigurationError("Puzzle needs at least one entity")
        if not self.locations:
            raise ConfigurationError("Puzzle needs at least one location")
        if len(set(self.entities)) != len(self.entities):
            raise ConfigurationError(f"Duplicate entities in {self.entities}")
        if len(set(self.locations)) != len(self.locations):
            raise ConfigurationError(f"Duplicate locations in {self.locations}")
        if WITH_CARRIER in self.locations:
            raise ConfigurationError(f"'{WITH_CARRIER}' is reserved and cannot be declared")

        if self.carrier not in self.entities:
            raise UnknownEntity(self.carrier)
        for location in (self.origin, self.destination):
            if location not in self.locations:
                raise UnknownLocation(location)

        for combo in self.unsafe_combinations:
            if not combo:
                raise ConfigurationError("Unsafe combinations must not be empty")
            for entity in combo:
                if entity not in self.entities:
                    raise UnknownEntity(entity)

        if self.capacity < 0:
            raise ConfigurationError(f"Capacity must be >= 0, got {self.capacity}")

    def _validate_initial_state(self, state: WorldState) -> None:
        for entity in state.entities:
            if entity not in self.entities:
                raise UnknownEntity(entity)
        missing = [e for e in self.entities if e not in state.entities]
        if missing:
            raise ConfigurationError(f"Initial state has no location for: {missing}")
        if state.carrier != self.carrier:
            raise ConfigurationError(
                f"Initial state carrier {state.carrier!r} != {self.carrier!r}"
            )

        for entity, location in state.placements:
            if location not in self.all_locations:
                raise UnknownLocation(location)
        if state.carrier_location == WITH_CARRIER:
            raise ConfigurationError("The carrier cannot carry itself")

        if state.entities != self.entities:
            # Keep entity order stable so equal mappings compare equal
            object.__setattr__(
                self, "initial_state",
                WorldState.from_mapping(state.as_dict(), self.carrier, order=self.entities)
            )
