"""
Board State Module - Immutable set of alive squares.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .level import Cell, Direction


@dataclass(frozen=True, order=True)
class Square:
    """
    A colored square on the grid.

    Attributes:
        cell: Current (x, y) position
        color: Palette color name, never changes
        direction: Current direction of travel
    """
    cell: Cell
    color: str
    direction: Direction


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses a frozenset of squares so equality and hashing do not depend
    on the order squares were discovered in.

    Attributes:
        squares: Alive squares
    """
    squares: FrozenSet[Square]

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> 'BoardState':
        """
        Create BoardState from any iterable of squares.

        Args:
            squares: Squares in any order

        Returns:
            BoardState instance
        """
        return cls(squares=frozenset(squares))

    @classmethod
    def empty(cls) -> 'BoardState':
        """The goal state."""
        return cls(squares=frozenset())

    @property
    def key(self) -> Tuple[Square, ...]:
        """Canonical sorted tuple of squares."""
        return tuple(sorted(self.squares))

    @property
    def is_goal(self) -> bool:
        """True once every square has been removed."""
        return not self.squares

    def count_squares(self) -> int:
        """Number of alive squares."""
        return len(self.squares)

    def color_counts(self) -> Dict[str, int]:
        """Alive square count per color."""
        return dict(Counter(sq.color for sq in self.squares))

    @property
    def colors(self) -> List[str]:
        """Sorted list of colors still present."""
        return sorted({sq.color for sq in self.squares})

    def squares_of(self, color: str) -> List[Square]:
        """All squares of a color, in canonical order."""
        return sorted(sq for sq in self.squares if sq.color == color)

    def occupancy(self) -> Dict[Cell, Square]:
        """Mapping of occupied cell -> square."""
        return {sq.cell: sq for sq in self.squares}
