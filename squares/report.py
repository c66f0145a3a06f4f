"""
Text report of a search result.
"""

from typing import List

from .solver import SearchOutcome, Solution


def format_solution(solution: Solution, show_metrics: bool = False) -> str:
    """
    Format a search result for printing.

    Args:
        solution: Result returned by a strategy
        show_metrics: Append search statistics

    Returns:
        Multi-line report
    """
    lines: List[str] = []

    if solution.outcome is SearchOutcome.SOLVED:
        lines.append(f"Solution found with {solution.move_count} moves")
        lines.append(f"Moves: {', '.join(solution.colors)}")
    elif solution.outcome is SearchOutcome.UNSOLVABLE:
        lines.append("No solution found")
        if solution.reason:
            lines.append(f"Reason: {solution.reason}")
    else:
        lines.append("No solution found within the search budget")
        if solution.reason:
            lines.append(f"Reason: {solution.reason}")

    if show_metrics:
        m = solution.metrics
        lines.append(
            f"Strategy: {m.strategy_name}, {m.states_explored} states explored, "
            f"{m.states_generated} generated, {m.pruned_branches} pruned, "
            f"{m.computation_time_ms:.1f}ms"
        )

    return "\n".join(lines)
