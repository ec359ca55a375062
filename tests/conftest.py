"""Shared fixtures for engine tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crossing.engine import SearchContext, create_strategy
from crossing.puzzles import fox_goose_grain_puzzle


@pytest.fixture
def puzzle():
    """The fox/goose/grain puzzle with capacity 1."""
    return fox_goose_grain_puzzle()


@pytest.fixture
def initial(puzzle):
    return puzzle.initial_state


@pytest.fixture
def plan(puzzle):
    """Plan found by breadth-first search for the reference puzzle."""
    return create_strategy("bfs").solve(SearchContext(puzzle=puzzle))
