"""
Strategy Factory Module - Lookup table of search strategies by name.
"""

from typing import Dict, List, Type, Any

from .base import SearchStrategy


DEFAULT_STRATEGY = "bfs"

# Filled at import time by @register_strategy
_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Class decorator adding a strategy to the lookup table under cls.name.

    Raises:
        ValueError: If another class already uses that name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name already taken: {cls.name}")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str = DEFAULT_STRATEGY, **kwargs: Any) -> SearchStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "bfs")
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If strategy name not found
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(sorted(_STRATEGIES))
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names in registration order."""
    return list(_STRATEGIES)
