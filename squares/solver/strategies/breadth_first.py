"""
Breadth-First Strategy - Exhaustive search in order of move count.
"""

from ..factory import register_strategy
from .best_first import BestFirstStrategy, Priority


@register_strategy
class BreadthFirstStrategy(BestFirstStrategy):
    """
    Breadth-first search; ignores the heuristic.

    Returns a shortest move sequence, at the cost of exploring every
    board closer to the start first. Useful as a reference on small
    levels.
    """
    name = "bfs"
    description = "Breadth-first (exhaustive) - Shortest sequence, slow on big levels"
    label = "BFS"
    uses_heuristic = False

    def _priority(self, moves: int, estimate: int) -> Priority:
        return (moves,)
