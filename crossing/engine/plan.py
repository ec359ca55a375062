"""
Plan Module - Result of a successful search and its metrics.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from .action import ActionInstance, ActionRegistry
from .state import WorldState


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        rounds: Expansion rounds completed
        paths_expanded: Paths whose successors were generated
        rejected_by_precondition: Action instances whose precondition failed
        rejected_by_invariant: Resulting states dropped by an invariant
        max_frontier_size: Largest frontier seen
        strategy_name: Name of strategy that ran
    """
    computation_time_ms: float = 0.0
    rounds: int = 0
    paths_expanded: int = 0
    rejected_by_precondition: int = 0
    rejected_by_invariant: int = 0
    max_frontier_size: int = 0
    strategy_name: str = ""

    @property
    def pruned_branches(self) -> int:
        """Total candidates discarded for any reason."""
        return self.rejected_by_precondition + self.rejected_by_invariant


@dataclass
class Plan:
    """
    A solution: actions that move every entity to the destination.

    Attributes:
        actions: Ordered actions to execute
        states: State before the first action and after each action
        metrics: Performance statistics
    """
    actions: List[ActionInstance] = field(default_factory=list)
    states: List[WorldState] = field(default_factory=list)
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def action_count(self) -> int:
        """Number of actions in the plan."""
        return len(self.actions)

    @property
    def initial_state(self) -> WorldState:
        return self.states[0]

    @property
    def final_state(self) -> WorldState:
        return self.states[-1]

    def get_state_after_action(self, index: int) -> WorldState:
        """
        Get the state after executing the action at index.

        Raises:
            IndexError: If index out of range
        """
        return self.states[index + 1]

    def count(self, kind: str) -> int:
        """Number of actions of the given kind."""
        return sum(1 for action in self.actions if action.kind == kind)

    def describe(self) -> List[str]:
        """One human-readable line per step."""
        return [
            f"{i + 1}. {action} -> {self.states[i + 1]}"
            for i, action in enumerate(self.actions)
        ]


def replay(actions: ActionRegistry, initial: WorldState,
           plan: Sequence[ActionInstance]) -> List[WorldState]:
    """
    Re-apply a sequence of actions from a starting state.

    Preconditions are not checked; the plan is assumed to come from a search.

    Args:
        actions: Registry that defines the action kinds
        initial: State to start from
        plan: Actions to apply in order

    Returns:
        Every state visited, starting with initial
    """
    states = [initial]
    for action in plan:
        states.append(actions.apply(states[-1], action))
    return states
