"""
Engine Package - Rule-driven state search for river-crossing puzzles.

This package provides the generic search engine: an immutable world state,
declarative action and invariant registries, and pluggable search
strategies. Concrete puzzles are plain configuration (see crossing.puzzles).

Public API:
    - WorldState: Immutable entity -> location mapping
    - ActionKind / ActionInstance / ActionRegistry: Declarative actions
    - InvariantRegistry: State and history rules
    - PuzzleConfig: Puzzle instance description and goal test
    - SearchPath: Partial solution explored by the search
    - SearchContext: Limits, cancellation and progress for one run
    - Plan / SearchMetrics: Result of a successful search
    - SearchStrategy: Abstract base for strategies
    - create_strategy(): Factory function

Usage:
    from crossing.engine import SearchContext, create_strategy
    from crossing.puzzles import fox_goose_grain_puzzle

    puzzle = fox_goose_grain_puzzle()
    plan = create_strategy("bfs").solve(SearchContext(puzzle=puzzle))

    for line in plan.describe():
        print(line)
"""

# Core data structures
from .errors import (
    CrossingError,
    ConfigurationError,
    UnknownEntity,
    UnknownLocation,
    MalformedAction,
    SearchExhausted,
    SearchLimitReached,
)
from .state import WorldState, WITH_CARRIER
from .action import ActionInstance, ActionKind, ActionRegistry
from .invariants import (
    BUILTIN_INVARIANTS,
    CARRYING_CAPACITY,
    NO_REPEATED_STATE,
    NO_UNSAFE_COMBINATION,
    InvariantRegistry,
    StateInvariant,
    HistoryInvariant,
    no_unsafe_combination_unsupervised,
    carrying_capacity,
    no_repeated_state,
)
from .puzzle import PuzzleConfig
from .path import SearchPath
from .plan import Plan, SearchMetrics, replay
from .context import SearchContext

# Strategy framework
from .base import SearchStrategy
from .factory import (
    DEFAULT_STRATEGY,
    create_strategy,
    get_strategy_names,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Errors
    "CrossingError",
    "ConfigurationError",
    "UnknownEntity",
    "UnknownLocation",
    "MalformedAction",
    "SearchExhausted",
    "SearchLimitReached",
    # Data structures
    "WorldState",
    "WITH_CARRIER",
    "ActionInstance",
    "ActionKind",
    "ActionRegistry",
    "InvariantRegistry",
    "BUILTIN_INVARIANTS",
    "CARRYING_CAPACITY",
    "NO_REPEATED_STATE",
    "NO_UNSAFE_COMBINATION",
    "StateInvariant",
    "HistoryInvariant",
    "no_unsafe_combination_unsupervised",
    "carrying_capacity",
    "no_repeated_state",
    "PuzzleConfig",
    "SearchPath",
    "Plan",
    "SearchMetrics",
    "replay",
    "SearchContext",
    # Strategy framework
    "SearchStrategy",
    "DEFAULT_STRATEGY",
    "create_strategy",
    "get_strategy_names",
    "register_strategy",
]
