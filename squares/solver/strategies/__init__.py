"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .astar import AStarStrategy
from .greedy import GreedyStrategy
from .breadth_first import BreadthFirstStrategy

__all__ = [
    "AStarStrategy",
    "GreedyStrategy",
    "BreadthFirstStrategy",
]
