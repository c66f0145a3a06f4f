"""
A* Strategy - Best-first search ordered by f = g + w * h.

With the default non-admissible "pairs" heuristic the returned sequence
is short but not guaranteed to be the shortest.
"""

from ..factory import register_strategy
from .best_first import BestFirstStrategy, Priority


@register_strategy
class AStarStrategy(BestFirstStrategy):
    """
    A*-style search over board states.

    Ties on f are broken by the smaller heuristic estimate, then by
    insertion order, so output is reproducible.

    Parameters:
        heuristic: Heuristic name (default "pairs")
        heuristic_weight: Multiplier on h (default 1.0; larger = greedier)
    """
    name = "astar"
    description = "A* (default) - Best-first on moves taken + estimate"
    label = "AStar"

    def __init__(self, heuristic: str = "pairs", heuristic_weight: float = 1.0):
        """
        Initialize A* strategy.

        Args:
            heuristic: Heuristic name
            heuristic_weight: Weight applied to the estimate (must be >= 0)
        """
        super().__init__(heuristic=heuristic)
        if heuristic_weight < 0:
            raise ValueError("heuristic_weight must be >= 0")
        self.heuristic_weight = heuristic_weight

    def _priority(self, moves: int, estimate: int) -> Priority:
        return (moves + self.heuristic_weight * estimate, estimate)
