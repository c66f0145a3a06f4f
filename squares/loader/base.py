"""
Level Loader Base Interface

Abstract base class defining the level loader contract, plus the shared
validation that turns raw level data into a Level.

Raw level schema (as decoded from JSON or YAML):

    width: int            optional, defaults to largest x + 1
    height: int           optional, defaults to largest y + 1
    walls:  [[x, y], ...]                                 optional
    arrows: [{direction: str, position: [x, y]}, ...]     optional
    blocks: [{color: str, direction: str, position: [x, y]}, ...]
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from ..solver import Direction, Level, LevelFormatError

TOP_LEVEL_KEYS = {"width", "height", "walls", "arrows", "blocks"}
ARROW_KEYS = {"direction", "position"}
BLOCK_KEYS = {"color", "direction", "position"}


class LevelLoader(ABC):
    """
    Abstract base class for level loaders.

    Implementations only decode a file into raw level data; validation
    and Level construction are shared by load().
    """

    @abstractmethod
    def read(self, path: Path) -> Any:
        """
        Decode a level file.

        Args:
            path: Level file path

        Returns:
            Raw level data (normally a dict)

        Raises:
            LevelFormatError: If the file cannot be decoded
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Loader identifier.

        Returns:
            String name identifying this loader (e.g., "json", "yaml")
        """
        pass

    def load(self, path: Union[str, Path]) -> Level:
        """
        Read, validate and build a level.

        Args:
            path: Level file path

        Returns:
            Level ready for solving

        Raises:
            OSError: If the file cannot be read
            LevelFormatError: If the content is malformed
        """
        return parse_level(self.read(Path(path)))


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelFormatError(f"{what} must be an integer, got {value!r}")
    return value


def _parse_position(value: Any, what: str) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise LevelFormatError(f"{what} must be an [x, y] pair, got {value!r}")
    x = _require_int(value[0], f"{what} x")
    y = _require_int(value[1], f"{what} y")
    if x < 0 or y < 0:
        raise LevelFormatError(f"{what} must not be negative, got [{x}, {y}]")
    return (x, y)


def _parse_direction(value: Any, what: str) -> Direction:
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            pass
    valid = ", ".join(d.value for d in Direction)
    raise LevelFormatError(f"{what} must be one of {valid}, got {value!r}")


def _check_keys(entry: Any, allowed: Set[str], required: Set[str], what: str) -> Dict[str, Any]:
    if not isinstance(entry, dict):
        raise LevelFormatError(f"{what} must be a mapping, got {type(entry).__name__}")
    unknown = set(entry) - allowed
    if unknown:
        raise LevelFormatError(
            f"{what} has unknown field(s) {sorted(unknown)}; expected {sorted(allowed)}"
        )
    missing = required - set(entry)
    if missing:
        raise LevelFormatError(f"{what} is missing field(s) {sorted(missing)}")
    return entry


def _as_list(value: Any, what: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise LevelFormatError(f"{what} must be a list")
    return value


def parse_level(data: Any) -> Level:
    """
    Validate raw level data and build a Level.

    Args:
        data: Decoded level mapping

    Returns:
        Level instance

    Raises:
        LevelFormatError: On unknown fields, bad values, overlapping
            squares, squares or arrows on walls, or positions out of bounds
    """
    data = _check_keys(data, TOP_LEVEL_KEYS, {"blocks"}, "level")

    walls = [
        _parse_position(w, f"walls[{i}]")
        for i, w in enumerate(_as_list(data.get("walls"), "walls"))
    ]

    arrows: List[Tuple[Tuple[int, int], Direction]] = []
    for i, entry in enumerate(_as_list(data.get("arrows"), "arrows")):
        what = f"arrows[{i}]"
        entry = _check_keys(entry, ARROW_KEYS, ARROW_KEYS, what)
        arrows.append((
            _parse_position(entry["position"], f"{what}.position"),
            _parse_direction(entry["direction"], f"{what}.direction"),
        ))

    blocks: List[Tuple[Tuple[int, int], str, Direction]] = []
    for i, entry in enumerate(_as_list(data["blocks"], "blocks")):
        what = f"blocks[{i}]"
        entry = _check_keys(entry, BLOCK_KEYS, BLOCK_KEYS, what)
        color = entry["color"]
        if not isinstance(color, str) or not color.strip():
            raise LevelFormatError(f"{what}.color must be a non-empty string")
        blocks.append((
            _parse_position(entry["position"], f"{what}.position"),
            color.strip(),
            _parse_direction(entry["direction"], f"{what}.direction"),
        ))

    cells = walls + [c for c, _ in arrows] + [c for c, _, _ in blocks]
    width = _dimension(data.get("width"), "width", [x for x, _ in cells])
    height = _dimension(data.get("height"), "height", [y for _, y in cells])

    for cell in cells:
        if not (cell[0] < width and cell[1] < height):
            raise LevelFormatError(f"position {list(cell)} is outside the {width}x{height} grid")

    wall_set = set(walls)
    arrow_cells: Set[Tuple[int, int]] = set()
    for cell, _ in arrows:
        if cell in wall_set:
            raise LevelFormatError(f"arrow at {list(cell)} is on a wall")
        if cell in arrow_cells:
            raise LevelFormatError(f"more than one arrow at {list(cell)}")
        arrow_cells.add(cell)

    occupied: Set[Tuple[int, int]] = set()
    for cell, color, _ in blocks:
        if cell in wall_set:
            raise LevelFormatError(f"block '{color}' at {list(cell)} is on a wall")
        if cell in occupied:
            raise LevelFormatError(f"more than one block at {list(cell)}")
        occupied.add(cell)

    return Level.from_description(
        width=width,
        height=height,
        squares=blocks,
        walls=walls,
        arrows=arrows,
    )


def _dimension(value: Optional[Any], what: str, coords: List[int]) -> int:
    if value is None:
        if not coords:
            raise LevelFormatError(f"{what} is required for a level without positions")
        return max(coords) + 1
    size = _require_int(value, what)
    if size < 1:
        raise LevelFormatError(f"{what} must be >= 1")
    return size
