"""
Greedy Strategy - Always expands the board that looks closest to empty.
"""

from ..factory import register_strategy
from .best_first import BestFirstStrategy, Priority


@register_strategy
class GreedyStrategy(BestFirstStrategy):
    """
    Greedy best-first search ordered by the heuristic alone.

    Usually the fastest to find a solution; the solution is often longer
    than the A* one.
    """
    name = "greedy"
    description = "Greedy (fast) - Expands the board with the lowest estimate"
    label = "Greedy"

    def _priority(self, moves: int, estimate: int) -> Priority:
        return (estimate, moves)
