"""
Invariants Module - Whole-state and whole-history rules every path must satisfy.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .state import WorldState, WITH_CARRIER


# Built-in invariant names, derived from puzzle fields
NO_UNSAFE_COMBINATION = "no-unsafe-combination-unsupervised"
CARRYING_CAPACITY = "carrying-capacity"
NO_REPEATED_STATE = "no-repeated-state"
BUILTIN_INVARIANTS = (NO_UNSAFE_COMBINATION, CARRYING_CAPACITY, NO_REPEATED_STATE)

StateCheck = Callable[[WorldState], bool]
HistoryCheck = Callable[[WorldState, Sequence[WorldState]], bool]


@dataclass(frozen=True)
class StateInvariant:
    """
    Rule evaluated on a single state.

    Attributes:
        name: Identifier reported on violation
        check: (state) -> True if the state is acceptable
    """
    name: str
    check: StateCheck


@dataclass(frozen=True)
class HistoryInvariant:
    """
    Rule evaluated on a state against the states visited before it.

    Attributes:
        name: Identifier reported on violation
        check: (new_state, prior_states) -> True if acceptable
    """
    name: str
    check: HistoryCheck


class InvariantRegistry:
    """
    Ordered catalog of state and history invariants.

    A candidate state survives only if every registered invariant holds.
    """

    def __init__(self):
        self._state: Dict[str, StateInvariant] = {}
        self._history: Dict[str, HistoryInvariant] = {}

    def add_state(self, name: str, check: StateCheck) -> StateInvariant:
        """Register a state invariant."""
        self._ensure_unique(name)
        invariant = StateInvariant(name, check)
        self._state[name] = invariant
        return invariant

    def add_history(self, name: str, check: HistoryCheck) -> HistoryInvariant:
        """Register a history invariant."""
        self._ensure_unique(name)
        invariant = HistoryInvariant(name, check)
        self._history[name] = invariant
        return invariant

    @property
    def state_invariants(self) -> Tuple[StateInvariant, ...]:
        return tuple(self._state.values())

    @property
    def history_invariants(self) -> Tuple[HistoryInvariant, ...]:
        return tuple(self._history.values())

    def accepts_state(self, state: WorldState) -> bool:
        """True if every state invariant holds."""
        return all(inv.check(state) for inv in self._state.values())

    def accepts_history(self, state: WorldState,
                        prior_states: Sequence[WorldState]) -> bool:
        """True if every history invariant holds."""
        return all(inv.check(state, prior_states) for inv in self._history.values())

    def accepts(self, state: WorldState,
                prior_states: Sequence[WorldState] = ()) -> bool:
        """
        Check a candidate state against all invariants.

        Stops at the first violation.

        Args:
            state: Candidate state
            prior_states: States visited before it on the same path

        Returns:
            True if the state may stay in the search
        """
        return self.accepts_state(state) and self.accepts_history(state, prior_states)

    def violations(self, state: WorldState,
                   prior_states: Sequence[WorldState] = ()) -> Tuple[str, ...]:
        """Names of every invariant the state violates."""
        failed: List[str] = [
            inv.name for inv in self._state.values() if not inv.check(state)
        ]
        failed.extend(
            inv.name for inv in self._history.values()
            if not inv.check(state, prior_states)
        )
        return tuple(failed)

    def _ensure_unique(self, name: str) -> None:
        if name in self._state or name in self._history:
            raise ValueError(f"Invariant already registered: {name}")


# ----------
# Built-in invariants
# ----------

def no_unsafe_combination_unsupervised(
        unsafe_combinations: Iterable[Iterable[str]]) -> StateCheck:
    """
    Build the check that forbids leaving an unsafe combination unsupervised.

    A combination is unsupervised when all its members share a bank location
    and the carrier is elsewhere. Members being carried are supervised.
    """
    combinations = tuple(tuple(combo) for combo in unsafe_combinations)

    def check(state: WorldState) -> bool:
        for combo in combinations:
            common = state.together(combo)
            if common is None or common == WITH_CARRIER:
                continue
            if common != state.carrier_location:
                return False
        return True

    return check


def carrying_capacity(capacity: int) -> StateCheck:
    """Build the check that limits how many entities are carried at once."""

    def check(state: WorldState) -> bool:
        return len(state.entities_at(WITH_CARRIER)) <= capacity

    return check


def no_repeated_state(state: WorldState, prior_states: Sequence[WorldState]) -> bool:
    """A state must not equal any state visited earlier on the same path."""
    return state not in prior_states
