"""
Breadth-First Strategy - Level-by-level expansion of every valid continuation.

Keeps every surviving path of a round (no beam pruning) and stops at the
first round that produces a complete path. Since all paths in a frontier
have equal length, the returned plan has the fewest actions possible.

Optionally expands a frontier on a thread pool; children are collected in
frontier order so the result is identical to the sequential run.
"""

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ..base import SearchStrategy
from ..context import SearchContext
from ..errors import SearchExhausted, SearchLimitReached
from ..path import SearchPath
from ..plan import Plan, SearchMetrics
from ..puzzle import PuzzleConfig
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SearchStrategy):
    """
    Exhaustive breadth-first search over action sequences.

    Algorithm:
        1. Start with one empty path at the initial state
        2. For each round:
           - Expand every path in the frontier by every valid action
           - Drop results rejected by an invariant
        3. Return the first complete path, in production order
        4. Fail when a round produces no paths at all

    Repeated states are excluded per path, so every branch is bounded by
    the number of distinct states and the search always terminates.

    Parameters:
        workers: Overrides the context's thread count when given
    """
    name = "bfs"
    description = "Breadth-first search - first complete path with fewest actions"

    def __init__(self, workers: Optional[int] = None):
        """
        Initialize breadth-first strategy.

        Args:
            workers: Threads used to expand a frontier (None = use context)
        """
        self.workers = workers

    def solve(self, context: SearchContext) -> Plan:
        """
        Run rounds until a goal state is reached or the frontier empties.

        Args:
            context: Search context with puzzle, limits and cancellation

        Returns:
            Plan for the first complete path found

        Raises:
            SearchExhausted: If no path reaches the goal
            SearchLimitReached: If a limit, timeout or cancellation stopped the search
        """
        start_time = time.perf_counter()
        # Timeout counts from here, not from when the context was built
        context.start_time = time.time()
        puzzle = context.puzzle
        metrics = SearchMetrics(strategy_name=self.name)

        initial = puzzle.initial_state
        root = SearchPath.start(initial, puzzle.is_complete(initial))
        if root.is_complete:
            logger.info("[BFS] Initial state already satisfies the goal")
            return self._build_plan(root, metrics, start_time)

        workers = self.workers if self.workers is not None else context.workers
        executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None

        try:
            frontier: List[SearchPath] = [root]
            metrics.max_frontier_size = 1

            while True:
                self._check_limits(context, metrics, start_time)

                frontier = self._expand_frontier(frontier, puzzle, metrics, executor)
                metrics.rounds += 1
                metrics.max_frontier_size = max(metrics.max_frontier_size, len(frontier))

                logger.debug(
                    f"[BFS] Round {metrics.rounds}: {len(frontier)} paths, "
                    f"{metrics.pruned_branches} pruned so far"
                )
                context.report_progress(
                    metrics.rounds, f"{len(frontier)} paths in frontier"
                )

                for path in frontier:
                    if path.is_complete:
                        logger.info(
                            f"[BFS] Solution found: {path.depth} actions, "
                            f"{metrics.rounds} rounds, {metrics.paths_expanded} paths expanded"
                        )
                        return self._build_plan(path, metrics, start_time)

                if not frontier:
                    self._finish_metrics(metrics, start_time)
                    logger.info(
                        f"[BFS] No solution: frontier empty after {metrics.rounds} rounds"
                    )
                    raise SearchExhausted(
                        f"No solution: frontier emptied after {metrics.rounds} rounds",
                        metrics,
                    )

                if context.max_frontier is not None and len(frontier) > context.max_frontier:
                    self._finish_metrics(metrics, start_time)
                    raise SearchLimitReached(
                        f"Frontier grew to {len(frontier)} paths "
                        f"(limit {context.max_frontier})",
                        metrics,
                    )
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

    def _expand_frontier(
        self,
        frontier: List[SearchPath],
        puzzle: PuzzleConfig,
        metrics: SearchMetrics,
        executor: Optional[ThreadPoolExecutor]
    ) -> List[SearchPath]:
        """
        Expand all paths in the frontier by one action.

        Args:
            frontier: Current frontier
            puzzle: Puzzle configuration (read-only)
            metrics: Metrics updated in place
            executor: Thread pool, or None to expand sequentially

        Returns:
            Next frontier, children grouped by parent in frontier order
        """
        if executor is not None and len(frontier) > 1:
            results = list(executor.map(lambda path: self.expand(path, puzzle), frontier))
        else:
            results = [self.expand(path, puzzle) for path in frontier]

        next_frontier: List[SearchPath] = []
        for children, rejected_pre, rejected_inv in results:
            next_frontier.extend(children)
            metrics.rejected_by_precondition += rejected_pre
            metrics.rejected_by_invariant += rejected_inv
        metrics.paths_expanded += len(frontier)
        return next_frontier

    def _check_limits(self, context: SearchContext, metrics: SearchMetrics,
                      start_time: float) -> None:
        """Raise SearchLimitReached if the next round must not run."""
        if self._check_cancelled(context):
            self._finish_metrics(metrics, start_time)
            logger.warning(f"[BFS] Cancelled after {metrics.rounds} rounds")
            raise SearchLimitReached(
                f"Search cancelled or timed out after {metrics.rounds} rounds", metrics
            )
        if context.max_rounds is not None and metrics.rounds >= context.max_rounds:
            self._finish_metrics(metrics, start_time)
            raise SearchLimitReached(
                f"Round limit reached ({context.max_rounds})", metrics
            )

    def _finish_metrics(self, metrics: SearchMetrics, start_time: float) -> None:
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

    def _build_plan(self, path: SearchPath, metrics: SearchMetrics,
                    start_time: float) -> Plan:
        """Build Plan object from the winning path."""
        self._finish_metrics(metrics, start_time)
        return Plan(
            actions=list(path.actions),
            states=list(path.visited),
            metrics=metrics,
        )
