"""
Best-First Search - Shared engine for A*, greedy and breadth-first search.

The state graph is not a tree (different trigger orders reach the same
board), so every board is tracked in a visited map keyed by the board
itself, holding the cheapest move count found so far. A board is
re-queued only when reached with strictly fewer moves.

Frontier entries are (priority, insertion counter, moves, board); the
counter makes ordering deterministic when priorities tie.
"""

import heapq
import itertools
import logging
import time
from abc import abstractmethod
from typing import Dict, List, Optional, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..heuristic import Heuristic, get_heuristic, is_dead
from ..move import Move
from ..solution import SearchOutcome, Solution, SolutionMetrics

logger = logging.getLogger(__name__)

# Expansions between debug log lines / progress callbacks
PROGRESS_INTERVAL = 1000

Priority = Tuple[float, ...]


class BestFirstStrategy(SolverStrategy):
    """
    Generic best-first graph search over board states.

    Subclasses only decide the frontier ordering through _priority().

    Parameters:
        heuristic: Name of the heuristic used for h (see heuristic.HEURISTICS)
    """
    name = "best_first"
    description = "Best-first search"
    label = "BestFirst"
    uses_heuristic = True

    def __init__(self, heuristic: str = "pairs"):
        """
        Initialize best-first strategy.

        Args:
            heuristic: Heuristic name, "pairs" (default) or "colors"
        """
        self.heuristic_name = heuristic
        self._heuristic: Heuristic = get_heuristic(heuristic)

    @abstractmethod
    def _priority(self, moves: int, estimate: int) -> Priority:
        """
        Frontier ordering key, lowest first.

        Args:
            moves: Moves taken to reach the board (g)
            estimate: Heuristic estimate of remaining moves (h)
        """
        pass

    def _estimate(self, board: BoardState) -> int:
        return self._heuristic(board) if self.uses_heuristic else 0

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a move sequence that empties the board.

        Args:
            context: Solution context with level, board, budget

        Returns:
            Solution whose outcome is SOLVED, UNSOLVABLE or BUDGET_EXCEEDED
        """
        start_time = time.perf_counter()
        level = context.level
        start = context.board
        metrics = SolutionMetrics()

        initial_squares = start.count_squares()
        logger.info(
            f"[{self.label}] Searching: {initial_squares} squares, "
            f"colors {start.colors}, heuristic={self.heuristic_name}"
        )

        if start.is_goal:
            return self._build_solution(
                SearchOutcome.SOLVED, [], [start], metrics, start_time
            )
        if is_dead(start):
            return self._build_solution(
                SearchOutcome.UNSOLVABLE, [], [start], metrics, start_time,
                reason="a color has an odd number of squares"
            )

        counter = itertools.count()
        frontier: List[Tuple[Priority, int, int, BoardState]] = [
            (self._priority(0, self._estimate(start)), next(counter), 0, start)
        ]
        best_moves: Dict[BoardState, int] = {start: 0}
        parents: Dict[BoardState, Tuple[BoardState, Move]] = {}
        depth_limited = False
        fewest_squares = initial_squares

        while frontier:
            if self._check_cancelled(context):
                return self._stop(
                    metrics, start, start_time,
                    f"timed out or cancelled after {context.elapsed_time():.1f}s"
                )

            _, _, moves_so_far, board = heapq.heappop(frontier)
            if moves_so_far > best_moves[board]:
                # Superseded by a cheaper path pushed later
                continue

            if board.is_goal:
                moves, boards = self._reconstruct(board, parents)
                logger.info(
                    f"[{self.label}] Solution found: {len(moves)} moves, "
                    f"{metrics.states_explored} states explored"
                )
                return self._build_solution(
                    SearchOutcome.SOLVED, moves, boards, metrics, start_time
                )

            if not context.depth_allowed(moves_so_far):
                depth_limited = True
                continue

            if context.expansions_exhausted(metrics.states_explored):
                return self._stop(
                    metrics, start, start_time,
                    f"expansion limit of {context.max_expansions} reached"
                )

            metrics.states_explored += 1
            for move in self.find_all_valid_moves(level, board):
                metrics.states_generated += 1
                successor = move.board
                cost = moves_so_far + 1

                if is_dead(successor):
                    metrics.pruned_branches += 1
                    continue
                known = best_moves.get(successor)
                if known is not None and known <= cost:
                    metrics.pruned_branches += 1
                    continue

                best_moves[successor] = cost
                parents[successor] = (board, move)
                heapq.heappush(frontier, (
                    self._priority(cost, self._estimate(successor)),
                    next(counter), cost, successor
                ))
                fewest_squares = min(fewest_squares, successor.count_squares())

            metrics.max_frontier = max(metrics.max_frontier, len(frontier))

            if metrics.states_explored % PROGRESS_INTERVAL == 0:
                cleared = initial_squares - fewest_squares
                context.report_progress(
                    min(0.99, cleared / initial_squares),
                    f"{metrics.states_explored} states explored, "
                    f"best board has {fewest_squares} squares"
                )
                logger.debug(
                    f"[{self.label}] {metrics.states_explored} expanded, "
                    f"frontier {len(frontier)}, visited {len(best_moves)}"
                )

        if depth_limited:
            return self._stop(
                metrics, start, start_time,
                f"no solution within {context.max_moves} moves"
            )

        logger.info(
            f"[{self.label}] Exhausted {len(best_moves)} reachable states without a solution"
        )
        return self._build_solution(
            SearchOutcome.UNSOLVABLE, [], [start], metrics, start_time,
            reason=f"all {len(best_moves)} reachable states explored"
        )

    def _stop(
        self,
        metrics: SolutionMetrics,
        start: BoardState,
        start_time: float,
        reason: str
    ) -> Solution:
        """Build a BUDGET_EXCEEDED solution."""
        logger.info(f"[{self.label}] Search stopped: {reason}")
        return self._build_solution(
            SearchOutcome.BUDGET_EXCEEDED, [], [start], metrics, start_time,
            reason=reason
        )

    @staticmethod
    def _reconstruct(
        goal: BoardState,
        parents: Dict[BoardState, Tuple[BoardState, Move]]
    ) -> Tuple[List[Move], List[BoardState]]:
        """
        Walk predecessor links back from the goal.

        Returns:
            (moves in play order, boards from initial to goal)
        """
        moves: List[Move] = []
        boards: List[BoardState] = [goal]
        board: Optional[BoardState] = goal
        while board in parents:
            board, move = parents[board]
            moves.append(move)
            boards.append(board)
        moves.reverse()
        boards.reverse()
        return moves, boards
