"""
Search Path Module - Immutable partial solution explored by the search driver.
"""

from dataclasses import dataclass
from typing import Tuple

from .action import ActionInstance
from .state import WorldState


@dataclass(frozen=True)
class SearchPath:
    """
    Node in the breadth-first search tree.

    Represents a state reachable via a sequence of actions, together with
    every state visited before it (for history invariants).

    Attributes:
        actions: Actions taken so far
        state_log: States visited before the current one, oldest first
        current: State reached by the last action
        is_complete: True if current satisfies the goal test
    """
    actions: Tuple[ActionInstance, ...]
    state_log: Tuple[WorldState, ...]
    current: WorldState
    is_complete: bool = False

    @classmethod
    def start(cls, state: WorldState, is_complete: bool = False) -> "SearchPath":
        """Empty path seeded at the initial state."""
        return cls(actions=(), state_log=(), current=state, is_complete=is_complete)

    def extend(self, action: ActionInstance, state: WorldState,
               is_complete: bool = False) -> "SearchPath":
        """
        Create a child path one action longer. This path is unchanged.

        Args:
            action: Action taken from the current state
            state: State it produced
            is_complete: Whether the new state is a goal state

        Returns:
            New SearchPath
        """
        return SearchPath(
            actions=self.actions + (action,),
            state_log=self.state_log + (self.current,),
            current=state,
            is_complete=is_complete,
        )

    @property
    def visited(self) -> Tuple[WorldState, ...]:
        """Every state on the path, including the current one."""
        return self.state_log + (self.current,)

    @property
    def depth(self) -> int:
        """Number of actions taken."""
        return len(self.actions)
