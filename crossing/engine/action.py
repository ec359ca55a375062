"""
Action Module - Declarative action kinds and the registry that enumerates them.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from .errors import MalformedAction
from .state import WorldState


@dataclass(frozen=True)
class ActionInstance:
    """
    A concrete action: a kind name plus one argument from its domain.

    Attributes:
        kind: Name of the action kind (e.g. "pick-up")
        argument: Argument drawn from the kind's domain, None for nullary kinds
    """
    kind: str
    argument: Optional[Hashable] = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.kind
        return f"{self.kind}({self.argument})"


Precondition = Callable[[WorldState, ActionInstance], bool]
Effect = Callable[[WorldState, ActionInstance], WorldState]


@dataclass(frozen=True)
class ActionKind:
    """
    Declaration of one kind of action.

    Preconditions encode applicability only; safety of the resulting state
    is checked by invariants. The effect must only be called when the
    precondition held.

    Attributes:
        name: Unique kind name
        domain: Ordered argument domain; (None,) for nullary kinds
        precondition: (state, instance) -> bool
        effect: (state, instance) -> new WorldState
    """
    name: str
    domain: Tuple[Any, ...]
    precondition: Precondition
    effect: Effect

    def instances(self) -> Tuple[ActionInstance, ...]:
        """Every concrete instance of this kind, in domain order."""
        return tuple(ActionInstance(self.name, argument) for argument in self.domain)


class ActionRegistry:
    """
    Ordered lookup table of action kinds.

    Enumeration order is registration order, then domain order, which
    makes search exploration order deterministic.
    """

    def __init__(self, kinds: Optional[List[ActionKind]] = None):
        self._kinds: Dict[str, ActionKind] = {}
        for kind in kinds or []:
            self.register(kind)

    def register(self, kind: ActionKind) -> ActionKind:
        """
        Add an action kind.

        Raises:
            ValueError: If a kind with the same name is already registered
        """
        if kind.name in self._kinds:
            raise ValueError(f"Action kind already registered: {kind.name}")
        self._kinds[kind.name] = kind
        return kind

    def get(self, name: str) -> ActionKind:
        """
        Look up an action kind by name.

        Raises:
            MalformedAction: If no such kind exists
        """
        if name not in self._kinds:
            available = ", ".join(self._kinds.keys())
            raise MalformedAction(f"Unknown action kind: {name}. Available: {available}")
        return self._kinds[name]

    @property
    def names(self) -> List[str]:
        """Registered kind names in order."""
        return list(self._kinds.keys())

    def all_instances(self) -> Tuple[ActionInstance, ...]:
        """Cross product of every kind with its domain."""
        instances: List[ActionInstance] = []
        for kind in self._kinds.values():
            instances.extend(kind.instances())
        return tuple(instances)

    def is_allowed(self, state: WorldState, instance: ActionInstance) -> bool:
        """Run the instance's precondition against state."""
        kind = self._checked_kind(instance)
        return bool(kind.precondition(state, instance))

    def apply(self, state: WorldState, instance: ActionInstance) -> WorldState:
        """Apply the instance's effect to state (no precondition check)."""
        kind = self._checked_kind(instance)
        return kind.effect(state, instance)

    def _checked_kind(self, instance: ActionInstance) -> ActionKind:
        kind = self.get(instance.kind)
        if instance.argument not in kind.domain:
            raise MalformedAction(
                f"Argument {instance.argument!r} is outside the domain of {kind.name}"
            )
        return kind

    def __len__(self) -> int:
        return len(self._kinds)

    def __contains__(self, name: str) -> bool:
        return name in self._kinds
