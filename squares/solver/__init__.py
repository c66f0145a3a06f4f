"""
Solver Package - Search engine for the colored squares puzzle.

Triggering a color slides every square of that color until it is
blocked; same-color squares that collide annihilate in pairs. The
solver searches for a color sequence that empties the board.

Public API:
    - Level, Direction: Immutable level geometry
    - BoardState, Square: Immutable, order-independent board representation
    - Move: Result of triggering one color
    - simulate(), successors(), replay(): Move simulation
    - HEURISTICS, get_heuristic(), is_dead(): Remaining-move estimates
    - Solution, SolutionMetrics, SearchOutcome: Search results
    - SolutionContext: Level, budget and cancellation for a search
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from squares.solver import Level, SolutionContext, create_strategy

    context = SolutionContext(level=level, timeout_sec=10.0)
    solution = create_strategy("astar").solve(context)

    if solution.is_solved:
        print(f"{solution.move_count} moves: {', '.join(solution.colors)}")
"""

# Core data structures
from .level import Cell, Direction, Level
from .board import BoardState, Square
from .move import Move
from .errors import InvalidMoveError, LevelFormatError
from .simulator import simulate, successors, replay
from .heuristic import HEURISTICS, get_heuristic, is_dead
from .solution import SearchOutcome, Solution, SolutionMetrics
from .context import DEFAULT_MAX_MOVES, SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Cell",
    "Direction",
    "Level",
    "BoardState",
    "Square",
    "Move",
    "Solution",
    "SolutionMetrics",
    "SearchOutcome",
    "SolutionContext",
    "DEFAULT_MAX_MOVES",
    # Errors
    "InvalidMoveError",
    "LevelFormatError",
    # Simulation and heuristics
    "simulate",
    "successors",
    "replay",
    "HEURISTICS",
    "get_heuristic",
    "is_dead",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
