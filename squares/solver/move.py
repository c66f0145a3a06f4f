"""
Move Module - Result of triggering one color on a board.
"""

from dataclasses import dataclass
from typing import Tuple

from .board import BoardState
from .level import Cell


@dataclass(frozen=True)
class Move:
    """
    A color trigger together with its effect.

    Attributes:
        color: Triggered color
        board: Board state after the move
        moved: Starting cells of squares that ended on a different cell
        removed: Starting cells of squares that were annihilated
        ticks: Lock-step ticks until every square settled
    """
    color: str
    board: BoardState
    moved: Tuple[Cell, ...] = ()
    removed: Tuple[Cell, ...] = ()
    ticks: int = 0

    @property
    def removed_count(self) -> int:
        """Number of squares removed by this move (always even)."""
        return len(self.removed)

    def __hash__(self):
        """Enable using Move in sets and as dict keys."""
        return hash((self.color, self.board, self.moved, self.removed))
