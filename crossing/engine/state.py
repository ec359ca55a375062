"""
World State Module - Immutable entity-to-location mapping for crossing puzzles.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .errors import ConfigurationError, UnknownEntity


# Reserved pseudo-location for entities currently being carried
WITH_CARRIER = "with-carrier"


@dataclass(frozen=True)
class WorldState:
    """
    Immutable world state representation.

    Uses a tuple of (entity, location) pairs in a fixed entity order for
    hashability and deterministic iteration. Every entity always has exactly
    one location; being carried is the WITH_CARRIER location.

    Attributes:
        placements: Tuple of (entity, location) pairs, one per entity
        carrier: The entity that moves between locations
    """
    placements: Tuple[Tuple[str, str], ...]
    carrier: str

    @classmethod
    def from_mapping(cls, locations: Dict[str, str], carrier: str,
                     order: Optional[Sequence[str]] = None) -> 'WorldState':
        """
        Create WorldState from an entity -> location dict.

        Args:
            locations: Mapping of every entity to its location
            carrier: Carrier entity (must be a key of locations)
            order: Entity order to store; defaults to dict order

        Returns:
            WorldState instance
        """
        order = tuple(order) if order is not None else tuple(locations)
        if carrier not in locations:
            raise UnknownEntity(carrier)
        if carrier not in order:
            raise ConfigurationError(f"Entity order leaves out the carrier {carrier!r}")
        placements = []
        for entity in order:
            if entity not in locations:
                raise UnknownEntity(entity)
            placements.append((entity, locations[entity]))
        return cls(placements=tuple(placements), carrier=carrier)

    @classmethod
    def uniform(cls, entities: Iterable[str], carrier: str,
                location: str) -> 'WorldState':
        """Create a state with every entity at the same location."""
        entities = tuple(entities)
        return cls.from_mapping(
            {entity: location for entity in entities}, carrier, order=entities
        )

    @property
    def entities(self) -> Tuple[str, ...]:
        """Entities in fixed order."""
        return tuple(entity for entity, _ in self.placements)

    @property
    def carrier_location(self) -> str:
        """Current location of the carrier."""
        return self.location_of(self.carrier)

    def location_of(self, entity: str) -> str:
        """
        Get the location of an entity.

        Args:
            entity: Entity identifier

        Returns:
            The entity's location

        Raises:
            UnknownEntity: If entity is not part of this state
        """
        for name, location in self.placements:
            if name == entity:
                return location
        raise UnknownEntity(entity)

    def together(self, entities: Iterable[str]) -> Optional[str]:
        """
        Check whether all given entities share a location.

        Args:
            entities: Non-empty collection of entities

        Returns:
            The common location, or None if they are split up
        """
        locations = {self.location_of(entity) for entity in entities}
        if not locations:
            raise ValueError("together() needs at least one entity")
        if len(locations) == 1:
            return next(iter(locations))
        return None

    def is_with_carrier(self, entity: str) -> bool:
        """True if entity is at the same location as the carrier."""
        return self.location_of(entity) == self.carrier_location

    def is_at(self, entity: str, location: str) -> bool:
        """True if entity is at the given location."""
        return self.location_of(entity) == location

    def entities_at(self, location: str) -> Tuple[str, ...]:
        """All entities at a location, in fixed entity order."""
        return tuple(
            entity for entity, where in self.placements if where == location
        )

    def move(self, entity: str, new_location: str) -> 'WorldState':
        """
        Create a new state with one entity relocated.

        No validation is performed on new_location; rules belong to actions
        and invariants. Original state is unchanged.

        Args:
            entity: Entity to move
            new_location: Its new location

        Returns:
            New WorldState
        """
        if entity not in self.entities:
            raise UnknownEntity(entity)
        placements = tuple(
            (name, new_location if name == entity else location)
            for name, location in self.placements
        )
        return WorldState(placements=placements, carrier=self.carrier)

    def as_dict(self) -> Dict[str, str]:
        """
        Convert to a mutable dict representation.

        Returns:
            Entity -> location dict in fixed entity order
        """
        return dict(self.placements)

    def __str__(self) -> str:
        return ", ".join(f"{entity}@{location}" for entity, location in self.placements)
