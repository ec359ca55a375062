"""
Planner Module - One-call entry point from puzzle configuration to plan.

Combines settings, search context and strategy selection. For finer
control (cancellation from another thread, progress callbacks) build a
SearchContext and call the strategy directly; see crossing.engine.
"""

import logging
from typing import Any, Dict, Optional

from crossing.engine import Plan, PuzzleConfig, SearchContext, create_strategy
from crossing.settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def find_plan(puzzle: PuzzleConfig,
              strategy_name: Optional[str] = None,
              settings: Optional[Dict[str, Any]] = None,
              **overrides: Any) -> Plan:
    """
    Search for a plan that solves the puzzle.

    Args:
        puzzle: Puzzle configuration
        strategy_name: Strategy to use (default: from settings)
        settings: Settings dict, e.g. from load_settings() (default: defaults)
        **overrides: Individual setting overrides (max_rounds=..., workers=...)

    Returns:
        Plan reaching the puzzle's goal

    Raises:
        SearchExhausted: If no plan exists within the configured limits
        ValueError: If the strategy name is unknown
    """
    merged = DEFAULT_SETTINGS.copy()
    merged.update(settings or {})
    merged.update(overrides)

    name = strategy_name or merged["strategy_name"]
    strategy = create_strategy(name)
    context = SearchContext.from_settings(puzzle, merged)

    logger.info(f"Searching with strategy '{name}'")
    plan = strategy.solve(context)
    logger.info(
        f"Plan ready: {plan.action_count} actions in "
        f"{plan.metrics.computation_time_ms:.1f}ms"
    )
    return plan
