"""
Squares Solver - Entry Point

Loads a level file, searches for a color sequence that clears it, and
prints the move count and color order.

Example:
    python main.py levels/tutorial.yaml
    python main.py levels/corner.json --strategy bfs --show
    python main.py big_level.yaml --timeout 60 --max-moves 80 --debug
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from squares.debug import DEBUG_DIR, save_solution_frames
from squares.loader import load_level
from squares.render import render_board, render_legend
from squares.report import format_solution
from squares.settings import SETTINGS_FILE, load_settings, save_settings
from squares.solver import (
    LevelFormatError,
    SolutionContext,
    create_strategy,
    get_strategy_names,
    HEURISTICS,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_SOLUTION = 2


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging - output to console and optionally to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Squares Solver - Find a color sequence that clears a level"
    )
    parser.add_argument("level", help="Level file (.json, .yaml or .yml)")
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Search strategy (default from settings: astar)"
    )
    parser.add_argument(
        "--heuristic",
        choices=sorted(HEURISTICS),
        help="Heuristic for astar/greedy (default from settings: pairs)"
    )
    parser.add_argument(
        "--weight", type=float, dest="heuristic_weight",
        help="Heuristic weight for astar (default from settings: 1.0)"
    )
    parser.add_argument(
        "--max-moves", type=int,
        help="Longest move sequence to consider (default from settings: 50)"
    )
    parser.add_argument(
        "--max-expansions", type=int,
        help="Maximum number of states to expand (default from settings: 200000)"
    )
    parser.add_argument(
        "--timeout", type=float, dest="timeout_sec",
        help="Search time limit in seconds (default from settings: 20)"
    )
    parser.add_argument(
        "--config", "-c",
        default=str(SETTINGS_FILE),
        help=f"Settings file (default: {SETTINGS_FILE})"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Write the effective settings back to the settings file"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the board after every move of the solution"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help=f"Save an image of every board of the solution to {DEBUG_DIR}"
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print search statistics"
    )
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge saved settings with command line overrides."""
    settings = load_settings(args.config)

    overrides = {
        "strategy_name": args.strategy,
        "heuristic": args.heuristic,
        "heuristic_weight": args.heuristic_weight,
        "max_moves": args.max_moves,
        "max_expansions": args.max_expansions,
        "timeout_sec": args.timeout_sec,
    }
    for key, value in overrides.items():
        if value is not None:
            settings[key] = value
    if args.debug:
        settings["debug_enabled"] = True

    return settings


def _strategy_options(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Constructor arguments for the configured strategy."""
    name = settings["strategy_name"]
    if name == "bfs":
        return {}
    options: Dict[str, Any] = {"heuristic": settings["heuristic"]}
    if name == "astar":
        options["heuristic_weight"] = settings["heuristic_weight"]
    return options


def run(args: argparse.Namespace) -> int:
    """
    Solve the level named on the command line.

    Returns:
        Exit code
    """
    settings = build_settings(args)
    if args.save_config:
        save_settings(settings, args.config)

    try:
        level = load_level(args.level)
    except (OSError, LevelFormatError, ValueError) as e:
        logger.error(f"Could not load level {args.level}: {e}")
        return EXIT_ERROR

    logger.info(
        f"Loaded {args.level}: {level.width}x{level.height}, "
        f"{len(level.squares)} squares, {len(level.arrows)} arrows, {len(level.walls)} walls"
    )

    try:
        strategy = create_strategy(settings["strategy_name"], **_strategy_options(settings))
        context = SolutionContext(
            level=level,
            timeout_sec=settings["timeout_sec"],
            max_expansions=settings["max_expansions"],
            max_moves=settings["max_moves"],
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_ERROR

    solution = strategy.solve(context)
    print(format_solution(solution, show_metrics=args.stats))

    if not solution.is_solved:
        return EXIT_NO_SOLUTION

    if args.show:
        print(render_legend(level))
        for index, board in enumerate(solution.board_states):
            heading = "Start" if index == 0 else f"After {solution.moves[index - 1].color}"
            print(f"\n{heading}:")
            print(render_board(level, board))

    if settings["debug_enabled"]:
        save_solution_frames(level, solution)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the solver."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
