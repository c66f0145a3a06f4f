"""
Tests for the search strategies

Covers:
1. Strategy registry and factory
2. Solved / unsolvable / budget-exceeded outcomes
3. Solution replay
4. Agreement with breadth-first search and with plain enumeration of
   every color sequence on small levels

A* and greedy use a non-admissible heuristic, so only the validity of
their solutions is checked, never the length.
"""

import threading

import pytest

from squares.solver import (
    SearchOutcome,
    SolutionContext,
    create_strategy,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
    simulate,
)

from conftest import make_level

STRATEGIES = ["astar", "greedy", "bfs"]
FIXTURES = ["adjacent_pair", "never_meet", "diagonal_pair", "blocked_corridor", "corner_arrow", "two_color_grid"]


def _solve(name, level, **budget):
    budget.setdefault("timeout_sec", None)
    context = SolutionContext(level=level, **budget)
    return create_strategy(name).solve(context)


class TestFactory:

    def test_registered_strategies(self):
        names = get_strategy_names()
        for name in STRATEGIES:
            assert name in names
        assert get_default_strategy_name() == "astar"

    def test_strategy_info(self):
        info = {entry["name"]: entry["description"] for entry in get_strategy_info()}
        assert set(STRATEGIES) <= set(info)
        assert all(info[name] for name in STRATEGIES)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            create_strategy("dijkstra")

    def test_unknown_heuristic(self):
        with pytest.raises(ValueError, match="Unknown heuristic"):
            create_strategy("astar", heuristic="nope")

    def test_negative_weight(self):
        with pytest.raises(ValueError):
            create_strategy("astar", heuristic_weight=-1.0)

    def test_options_are_passed(self):
        strategy = create_strategy("astar", heuristic="colors", heuristic_weight=2.0)
        assert strategy.heuristic_name == "colors"
        assert strategy.heuristic_weight == 2.0


@pytest.mark.parametrize("name", STRATEGIES)
class TestOutcomes:

    def test_adjacent_pair_in_one_move(self, name, adjacent_pair):
        solution = _solve(name, adjacent_pair)
        assert solution.outcome is SearchOutcome.SOLVED
        assert solution.move_count == 1
        assert solution.colors == ["red"]
        assert solution.final_board.is_goal

    def test_never_meeting_colors(self, name, never_meet):
        solution = _solve(name, never_meet)
        assert solution.outcome is SearchOutcome.UNSOLVABLE
        assert not solution.is_solved
        assert solution.moves == []
        assert solution.reason

    def test_even_but_unreachable(self, name, diagonal_pair):
        solution = _solve(name, diagonal_pair)
        assert solution.outcome is SearchOutcome.UNSOLVABLE

    def test_solution_replays(self, name, blocked_corridor):
        solution = _solve(name, blocked_corridor)
        assert solution.is_solved
        assert solution.verify(blocked_corridor)
        assert len(solution.board_states) == solution.move_count + 1
        assert solution.board_states[0] == blocked_corridor.initial_state()
        for index, move in enumerate(solution.moves):
            assert solution.get_move(index) is move
            assert solution.get_board_after_move(index) == move.board

    def test_arrow_level(self, name, corner_arrow):
        solution = _solve(name, corner_arrow)
        assert solution.is_solved
        assert solution.verify(corner_arrow)

    def test_empty_level_is_already_solved(self, name):
        solution = _solve(name, make_level(2, 2, []))
        assert solution.is_solved
        assert solution.move_count == 0
        assert solution.verify(make_level(2, 2, []))

    def test_metrics(self, name, blocked_corridor):
        solution = _solve(name, blocked_corridor)
        metrics = solution.metrics
        assert metrics.strategy_name == name
        assert metrics.states_explored >= solution.move_count
        assert metrics.states_generated > 0
        assert metrics.computation_time_ms >= 0


class TestBudget:

    def test_goal_generated_by_last_expansion_is_returned(self, adjacent_pair):
        solution = _solve("astar", adjacent_pair, max_expansions=1)
        assert solution.outcome is SearchOutcome.SOLVED
        assert solution.metrics.states_explored == 1

    def test_expansion_cap(self, blocked_corridor):
        solution = _solve("astar", blocked_corridor, max_expansions=1)
        assert solution.outcome is SearchOutcome.BUDGET_EXCEEDED
        assert "expansion limit" in solution.reason
        assert solution.metrics.states_explored == 1

    def test_move_cap(self, blocked_corridor):
        solution = _solve("bfs", blocked_corridor, max_moves=1)
        assert solution.outcome is SearchOutcome.BUDGET_EXCEEDED
        assert "within 1 moves" in solution.reason

    def test_move_cap_just_enough(self, blocked_corridor):
        solution = _solve("bfs", blocked_corridor, max_moves=2)
        assert solution.is_solved

    def test_cancelled(self, blocked_corridor):
        flag = threading.Event()
        flag.set()
        solution = _solve("astar", blocked_corridor, cancel_flag=flag)
        assert solution.outcome is SearchOutcome.BUDGET_EXCEEDED
        assert not solution.verify(blocked_corridor)

    def test_invalid_budget(self, blocked_corridor):
        with pytest.raises(ValueError):
            SolutionContext(level=blocked_corridor, max_expansions=0)
        with pytest.raises(ValueError):
            SolutionContext(level=blocked_corridor, max_moves=-1)

    @pytest.mark.parametrize("field, value", [
        ("timeout_sec", "soon"),
        ("timeout_sec", -1),
        ("max_expansions", 2.5),
        ("max_moves", "50"),
        ("max_moves", True),
    ])
    def test_malformed_budget(self, blocked_corridor, field, value):
        with pytest.raises(ValueError, match=field):
            SolutionContext(level=blocked_corridor, **{field: value})

    def test_context_defaults_to_initial_board(self, blocked_corridor):
        context = SolutionContext(level=blocked_corridor)
        assert context.board == blocked_corridor.initial_state()
        assert context.max_moves == 50


def test_bfs_finds_shortest(blocked_corridor):
    solution = _solve("bfs", blocked_corridor)
    assert solution.colors == ["blue", "red"]


@pytest.mark.parametrize("fixture", FIXTURES)
@pytest.mark.parametrize("name", ["astar", "greedy"])
def test_outcome_agrees_with_bfs(name, fixture, request):
    level = request.getfixturevalue(fixture)
    expected = _solve("bfs", level).outcome
    solution = _solve(name, level)
    assert solution.outcome is expected
    if solution.is_solved:
        assert solution.verify(level)


def test_searches_are_reproducible(two_color_grid):
    first = _solve("astar", two_color_grid)
    second = _solve("astar", two_color_grid)
    assert first.colors == second.colors
    assert first.outcome is second.outcome


# Exhaustive check: plain simulate() over every color sequence, no pruning
BRUTE_FORCE_DEPTH = 6


def _shortest_by_enumeration(level, depth):
    """Length of the shortest clearing sequence of at most `depth` moves, or None."""
    layer = [level.initial_state()]
    for moves in range(depth + 1):
        if any(board.is_goal for board in layer):
            return moves
        next_layer = []
        for board in layer:
            for color in board.colors:
                move = simulate(level, board, color)
                if move is not None:
                    next_layer.append(move.board)
        layer = next_layer
    return None


@pytest.mark.parametrize("fixture", FIXTURES)
def test_outcome_agrees_with_enumeration(fixture, request):
    level = request.getfixturevalue(fixture)
    shortest = _shortest_by_enumeration(level, BRUTE_FORCE_DEPTH)
    solution = _solve("bfs", level)
    if solution.outcome is SearchOutcome.UNSOLVABLE:
        assert shortest is None
    else:
        assert solution.is_solved
        if solution.move_count <= BRUTE_FORCE_DEPTH:
            assert shortest == solution.move_count
        else:
            assert shortest is None
