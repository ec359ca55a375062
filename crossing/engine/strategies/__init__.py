"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .breadth_first import BreadthFirstStrategy

__all__ = [
    "BreadthFirstStrategy",
]
