"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .board import BoardState
from .errors import InvalidMoveError
from .level import Level
from .move import Move
from .simulator import replay


class SearchOutcome(Enum):
    """
    How a search ended.

    SOLVED: A goal state was reached
    UNSOLVABLE: Every reachable state was explored without reaching the goal
    BUDGET_EXCEEDED: A timeout, expansion cap, move-depth cap, or
        cancellation cut the search short; unsolvability is not proven
    """
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of board states expanded
        states_generated: Number of successor boards produced
        pruned_branches: Successors discarded as dead or already reached more cheaply
        max_frontier: Largest frontier size seen
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_generated: int = 0
    pruned_branches: int = 0
    max_frontier: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        outcome: How the search ended
        moves: Ordered sequence of moves to execute (empty unless solved)
        board_states: Board state after each move (first is initial)
        metrics: Performance statistics
        reason: Human-readable detail for non-solved outcomes
    """
    outcome: SearchOutcome
    moves: List[Move] = field(default_factory=list)
    board_states: List[BoardState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    reason: str = ""

    @property
    def is_solved(self) -> bool:
        """True if the search reached the empty board."""
        return self.outcome is SearchOutcome.SOLVED

    @property
    def colors(self) -> List[str]:
        """Triggered colors, in order."""
        return [move.color for move in self.moves]

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def final_board(self) -> Optional[BoardState]:
        """Board after the last move, or None if no board was recorded."""
        return self.board_states[-1] if self.board_states else None

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Args:
            index: Move index (0-based)

        Returns:
            Move at index

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def get_board_after_move(self, index: int) -> BoardState:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            BoardState after move (index+1 in board_states)

        Raises:
            IndexError: If index out of range
        """
        return self.board_states[index + 1]

    def verify(self, level: Level) -> bool:
        """
        Replay the colors from the first recorded board and check the result.

        Args:
            level: Level the solution was computed for

        Returns:
            True if replay ends on the empty board
        """
        if not self.is_solved:
            return False
        start = self.board_states[0] if self.board_states else None
        try:
            return replay(level, self.colors, start).is_goal
        except InvalidMoveError:
            return False
