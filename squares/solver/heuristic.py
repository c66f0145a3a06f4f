"""
Heuristic Module - Estimates of remaining moves.

The estimates are deliberately not admissible: one trigger can clear
several pairs at once, so counting pairs may overstate the distance.
Search using them returns *a* solution quickly, not the shortest one.
"""

from collections import defaultdict
from typing import Callable, Dict, List

from .board import BoardState

Heuristic = Callable[[BoardState], int]


def pairs_heuristic(board: BoardState) -> int:
    """
    Count remaining pairs, plus one per color that needs redirecting.

    A color whose squares share no row and no column cannot annihilate
    by sliding in a straight line, so at least one arrow (or another
    square moving out of the way) is needed first.

    Args:
        board: Board to evaluate

    Returns:
        Estimated moves remaining (0 only for the empty board)
    """
    cells_by_color: Dict[str, List] = defaultdict(list)
    for sq in board.squares:
        cells_by_color[sq.color].append(sq.cell)

    estimate = 0
    for cells in cells_by_color.values():
        estimate += (len(cells) + 1) // 2
        xs = {x for x, _ in cells}
        ys = {y for _, y in cells}
        if len(xs) == len(cells) and len(ys) == len(cells):
            estimate += 1
    return estimate


def colors_heuristic(board: BoardState) -> int:
    """Number of distinct colors still on the board."""
    return len({sq.color for sq in board.squares})


def is_dead(board: BoardState) -> bool:
    """
    Check whether a board can never be cleared.

    Squares only disappear in same-color pairs, so a color with an odd
    number of squares always leaves one behind.
    """
    return any(count % 2 for count in board.color_counts().values())


HEURISTICS: Dict[str, Heuristic] = {
    "pairs": pairs_heuristic,
    "colors": colors_heuristic,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Look up a heuristic by name.

    Args:
        name: Heuristic name (e.g., "pairs", "colors")

    Returns:
        Heuristic function

    Raises:
        ValueError: If heuristic name not found
    """
    if name not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {name}. Available: {available}")
    return HEURISTICS[name]
