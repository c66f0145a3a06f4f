"""
Tests for the move simulator

Covers:
1. Merging (head-on, into a resting square, converging, chains)
2. Stopping at walls, edges and other colors
3. Arrow redirection
4. No-op and never-settling triggers
5. successors() and replay()
"""

import pytest

from squares.solver import (
    BoardState,
    Direction,
    InvalidMoveError,
    Square,
    replay,
    simulate,
    successors,
)

from conftest import make_level

R, L, U, D = Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN


def _board(*squares):
    return BoardState.from_squares(Square(cell, color, d) for cell, color, d in squares)


class TestMerging:

    def test_adjacent_pair_clears_in_one_move(self, adjacent_pair):
        move = simulate(adjacent_pair, adjacent_pair.initial_state(), "red")
        assert move is not None
        assert move.board.is_goal
        assert move.removed == ((0, 0), (1, 0))
        assert move.removed_count == 2

    def test_merge_into_resting_square(self):
        # The right square faces the edge and cannot move
        level = make_level(2, 1, [((0, 0), "red", R), ((1, 0), "red", R)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board.is_goal
        assert move.ticks == 1

    def test_head_on_in_the_middle(self):
        level = make_level(5, 1, [((0, 0), "red", R), ((4, 0), "red", L)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board.is_goal
        assert move.ticks == 2

    def test_perpendicular_movers_meet_on_empty_cell(self):
        level = make_level(3, 3, [((0, 1), "red", R), ((1, 0), "red", U)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board.is_goal
        assert move.ticks == 1

    def test_follower_chain_merges_at_the_wall(self):
        level = make_level(4, 1, [((0, 0), "red", R), ((1, 0), "red", R)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board.is_goal
        assert move.moved == ()
        assert move.ticks == 3

    def test_second_claimant_waits_and_moves_on(self):
        level = make_level(3, 2, [
            ((0, 1), "red", R),
            ((1, 1), "red", U),
            ((2, 1), "red", L),
        ])
        move = simulate(level, level.initial_state(), "red")
        assert move.removed == ((0, 1), (1, 1))
        assert move.moved == ((2, 1),)
        assert move.board == _board(((0, 1), "red", L))


class TestBlocking:

    def test_stops_before_wall(self):
        level = make_level(4, 1, [((0, 0), "red", R)], walls=[(2, 0)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board == _board(((1, 0), "red", R))
        assert move.moved == ((0, 0),)

    def test_stops_before_other_color(self):
        level = make_level(4, 1, [((0, 0), "red", R), ((3, 0), "blue", L)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board == _board(((2, 0), "red", R), ((3, 0), "blue", L))
        assert move.removed == ()

    def test_only_triggered_color_moves(self):
        level = make_level(4, 1, [((0, 0), "red", R), ((3, 0), "blue", L)])
        move = simulate(level, level.initial_state(), "blue")
        assert move.board == _board(((0, 0), "red", R), ((1, 0), "blue", L))

    def test_blocked_trigger_is_noop(self):
        level = make_level(3, 1, [((0, 0), "red", L), ((2, 0), "red", R)])
        assert simulate(level, level.initial_state(), "red") is None

    def test_absent_color_is_noop(self, adjacent_pair):
        assert simulate(adjacent_pair, adjacent_pair.initial_state(), "green") is None

    def test_never_meeting_colors_do_not_merge(self, never_meet):
        board = never_meet.initial_state()
        for color in ("red", "blue"):
            move = simulate(never_meet, board, color)
            assert move is None or move.board.count_squares() == 2


class TestArrows:

    def test_redirected_square_ends_on_redirected_path(self):
        level = make_level(3, 3, [((0, 0), "red", R)], arrows=[((2, 0), U)])
        move = simulate(level, level.initial_state(), "red")
        # Without the arrow the square would stop at (2, 0)
        assert move.board == _board(((2, 2), "red", U))
        assert move.ticks == 5

    def test_redirect_into_partner(self, corner_arrow):
        move = simulate(corner_arrow, corner_arrow.initial_state(), "red")
        assert move.board.is_goal

    def test_arrow_under_start_cell_is_ignored(self):
        level = make_level(3, 1, [((0, 0), "red", R)], arrows=[((0, 0), U)])
        move = simulate(level, level.initial_state(), "red")
        assert move.board == _board(((2, 0), "red", R))

    def test_arrow_loop_never_settles(self):
        level = make_level(2, 2, [((0, 0), "red", R)], arrows=[
            ((0, 0), R), ((1, 0), U), ((1, 1), L), ((0, 1), D),
        ])
        assert simulate(level, level.initial_state(), "red") is None


class TestSuccessors:

    def test_deterministic(self, two_color_grid):
        board = two_color_grid.initial_state()
        for color in board.colors:
            assert simulate(two_color_grid, board, color) == simulate(two_color_grid, board, color)

    def test_one_move_per_color_in_order(self, blocked_corridor):
        moves = successors(blocked_corridor, blocked_corridor.initial_state())
        assert [m.color for m in moves] == ["blue", "red"]

    @pytest.mark.parametrize("fixture", ["blocked_corridor", "two_color_grid", "corner_arrow"])
    def test_square_count_drops_by_even_amounts(self, fixture, request):
        level = request.getfixturevalue(fixture)
        frontier = [level.initial_state()]
        seen = set(frontier)
        while frontier:
            board = frontier.pop()
            for move in successors(level, board):
                dropped = board.count_squares() - move.board.count_squares()
                assert dropped >= 0
                assert dropped % 2 == 0
                assert dropped == move.removed_count
                if move.board not in seen:
                    seen.add(move.board)
                    frontier.append(move.board)


class TestReplay:

    def test_replay_solution(self, blocked_corridor):
        assert replay(blocked_corridor, ["blue", "red"]).is_goal

    def test_replay_from_given_board(self, blocked_corridor):
        after_blue = simulate(blocked_corridor, blocked_corridor.initial_state(), "blue").board
        assert replay(blocked_corridor, ["red"], after_blue).is_goal

    def test_replay_rejects_noop(self, blocked_corridor):
        with pytest.raises(InvalidMoveError) as excinfo:
            replay(blocked_corridor, ["red", "red"])
        assert excinfo.value.color == "red"
        assert excinfo.value.index == 1
        assert "move 2" in str(excinfo.value)
