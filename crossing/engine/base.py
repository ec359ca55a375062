"""
Base Strategy Module - Abstract base class for search strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from .context import SearchContext
from .path import SearchPath
from .plan import Plan
from .puzzle import PuzzleConfig


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SearchContext) -> Plan:
        """
        Search for a plan that solves the context's puzzle.

        Must periodically check context.is_cancelled().

        Args:
            context: Search context with puzzle, limits and cancellation

        Returns:
            Plan reaching a goal state

        Raises:
            SearchExhausted: If no plan exists or a limit stopped the search
        """
        pass

    def expand(self, path: SearchPath,
               puzzle: PuzzleConfig) -> Tuple[List[SearchPath], int, int]:
        """
        Generate every valid one-action continuation of a path.

        Each action instance is checked against its precondition before its
        effect runs; resulting states must pass every state invariant and
        every history invariant against the path's visited states.

        Args:
            path: Path to extend
            puzzle: Puzzle configuration

        Returns:
            Tuple of (children in enumeration order,
                      rejected_by_precondition, rejected_by_invariant)
        """
        children: List[SearchPath] = []
        rejected_pre = 0
        rejected_inv = 0
        state = path.current
        history = path.visited

        for instance in puzzle.actions.all_instances():
            if not puzzle.actions.is_allowed(state, instance):
                rejected_pre += 1
                continue

            new_state = puzzle.actions.apply(state, instance)
            if not puzzle.invariants.accepts(new_state, history):
                rejected_inv += 1
                continue

            children.append(
                path.extend(instance, new_state, puzzle.is_complete(new_state))
            )

        return children, rejected_pre, rejected_inv

    def _check_cancelled(self, context: SearchContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Search context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()
