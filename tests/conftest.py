"""
Shared fixtures for the solver tests.

Levels are built directly with Level.from_description; coordinates are
(x, y) with "up" increasing y.
"""

import pytest

from squares.solver import Direction, Level

R, L, U, D = Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN


def make_level(width, height, squares, walls=(), arrows=()):
    """Build a level from (cell, color, direction) triples."""
    return Level.from_description(
        width=width, height=height, squares=squares, walls=walls, arrows=arrows
    )


@pytest.fixture
def adjacent_pair():
    """1x2 grid, two red squares facing each other."""
    return make_level(2, 1, [((0, 0), "red", R), ((1, 0), "red", L)])


@pytest.fixture
def never_meet():
    """2x2 grid, one red and one blue square that can never meet."""
    return make_level(2, 2, [((0, 0), "red", U), ((1, 1), "blue", D)])


@pytest.fixture
def diagonal_pair():
    """3x3 grid, two red squares sliding past each other in parallel columns."""
    return make_level(3, 3, [((0, 0), "red", U), ((2, 2), "red", D)])


@pytest.fixture
def blocked_corridor():
    """
    5x1 corridor: red, blue, blue, empty, red.

    The blues must be cleared first; the shortest solution is blue, red.
    """
    return make_level(5, 1, [
        ((0, 0), "red", R),
        ((1, 0), "blue", R),
        ((2, 0), "blue", L),
        ((4, 0), "red", L),
    ])


@pytest.fixture
def corner_arrow():
    """3x3 grid, an arrow at the bottom-right corner turns red upwards into its partner."""
    return make_level(
        3, 3,
        [((0, 0), "red", R), ((2, 2), "red", U)],
        walls=[(1, 1)],
        arrows=[((2, 0), U)],
    )


@pytest.fixture
def two_color_grid():
    """4x4 grid with two colors that need a few moves to clear."""
    return make_level(4, 4, [
        ((0, 0), "red", U),
        ((0, 3), "blue", R),
        ((3, 3), "red", L),
        ((3, 0), "blue", U),
    ])
