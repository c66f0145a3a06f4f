"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import List

from .board import BoardState
from .context import SolutionContext
from .level import Level
from .move import Move
from .simulator import successors
from .solution import SearchOutcome, Solution, SolutionMetrics


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a move sequence that clears the board.

        Must periodically check context.is_cancelled() and stop with a
        BUDGET_EXCEEDED solution if True.

        Args:
            context: Solution context with level, board, budget

        Returns:
            Solution with outcome, moves and metrics
        """
        pass

    def find_all_valid_moves(self, level: Level, board: BoardState) -> List[Move]:
        """
        Find every color trigger that changes the board.

        Args:
            level: Static level geometry
            board: Current board state

        Returns:
            List of Move objects, one per useful color, in color order
        """
        return successors(level, board)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_solution(
        self,
        outcome: SearchOutcome,
        moves: List[Move],
        board_states: List[BoardState],
        metrics: SolutionMetrics,
        start_time: float,
        reason: str = ""
    ) -> Solution:
        """Build Solution object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.strategy_name = self.name

        return Solution(
            outcome=outcome,
            moves=moves,
            board_states=board_states,
            metrics=metrics,
            reason=reason,
        )
