"""
Level Module - Immutable puzzle geometry shared by every board state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import BoardState, Square

Cell = Tuple[int, int]


class Direction(str, Enum):
    """
    Axis-aligned direction of travel.

    Coordinates are (x, y) with "up" increasing y and "right" increasing x.
    """
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) for one step in this direction."""
        return _DELTAS[self]

    def step(self, cell: Cell) -> Cell:
        """Return the neighbouring cell in this direction."""
        dx, dy = _DELTAS[self]
        return (cell[0] + dx, cell[1] + dy)


_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Level:
    """
    Static puzzle description.

    Built once by a loader and shared by reference across every
    BoardState and simulation call. Never mutated.

    Attributes:
        width: Number of columns (x in [0, width))
        height: Number of rows (y in [0, height))
        walls: Impassable cells
        arrows: Tuple of (cell, direction) pairs, sorted by cell
        squares: Initial squares
    """
    width: int
    height: int
    walls: FrozenSet[Cell] = frozenset()
    arrows: Tuple[Tuple[Cell, Direction], ...] = ()
    squares: Tuple["Square", ...] = ()
    _arrow_map: Dict[Cell, Direction] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        # Frozen dataclass: populate the lookup table through object.__setattr__
        object.__setattr__(self, "_arrow_map", dict(self.arrows))

    @classmethod
    def from_description(
        cls,
        width: int,
        height: int,
        squares: Iterable[Tuple[Cell, str, Direction]],
        walls: Iterable[Cell] = (),
        arrows: Iterable[Tuple[Cell, Direction]] = (),
    ) -> 'Level':
        """
        Build a Level from already-parsed level data.

        Args:
            width: Grid width
            height: Grid height
            squares: (cell, color, facing direction) triples
            walls: Wall cells
            arrows: (cell, direction) pairs

        Returns:
            Level instance
        """
        from .board import Square

        return cls(
            width=width,
            height=height,
            walls=frozenset(tuple(w) for w in walls),
            arrows=tuple(sorted((tuple(c), Direction(d)) for c, d in arrows)),
            squares=tuple(sorted(
                Square(cell=tuple(c), color=color, direction=Direction(d))
                for c, color, d in squares
            )),
        )

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies inside the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, cell: Cell) -> bool:
        """Check whether a square may occupy a cell."""
        return self.in_bounds(cell) and cell not in self.walls

    def arrow_at(self, cell: Cell) -> Optional[Direction]:
        """Direction imposed by the arrow on a cell, or None."""
        return self._arrow_map.get(cell)

    def initial_state(self) -> 'BoardState':
        """Board state before any move."""
        from .board import BoardState

        return BoardState.from_squares(self.squares)

    @property
    def colors(self) -> List[str]:
        """Sorted palette of colors used by the initial squares."""
        return sorted({sq.color for sq in self.squares})
