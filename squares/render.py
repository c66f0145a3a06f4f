"""
Text rendering of boards for terminal output and logs.

Rows are printed top to bottom, so the highest y comes first ("up"
increases y).
"""

from typing import Dict, Iterable, List

from .solver import BoardState, Direction, Level

WALL = "#"
EMPTY = "."
ARROW_SYMBOLS: Dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


def color_symbols(colors: Iterable[str]) -> Dict[str, str]:
    """
    Assign a distinct single-character symbol to each color.

    Prefers the first unused letter of the color name (uppercased), then
    falls back to digits.

    Args:
        colors: Color names

    Returns:
        Mapping color -> symbol
    """
    taken = set(WALL + EMPTY + "".join(ARROW_SYMBOLS.values()))
    symbols: Dict[str, str] = {}
    spare = iter("0123456789abcdefghijklmnopqrstuwxyz")
    for color in sorted(set(colors)):
        candidates = [ch.upper() for ch in color if ch.isalpha()]
        symbol = next((ch for ch in candidates if ch not in taken), None)
        if symbol is None:
            symbol = next(ch for ch in spare if ch not in taken)
        symbols[color] = symbol
        taken.add(symbol)
    return symbols


def render_board(level: Level, board: BoardState) -> str:
    """
    Draw a board as a character grid.

    Squares hide the arrow under them.

    Args:
        level: Level geometry
        board: Board to draw

    Returns:
        Multi-line string, one line per row
    """
    symbols = color_symbols(level.colors)
    occupancy = board.occupancy()

    lines: List[str] = []
    for y in reversed(range(level.height)):
        row = []
        for x in range(level.width):
            cell = (x, y)
            square = occupancy.get(cell)
            arrow = level.arrow_at(cell)
            if square is not None:
                row.append(symbols[square.color])
            elif cell in level.walls:
                row.append(WALL)
            elif arrow is not None:
                row.append(ARROW_SYMBOLS[arrow])
            else:
                row.append(EMPTY)
        lines.append("".join(row))
    return "\n".join(lines)


def render_legend(level: Level) -> str:
    """One line mapping symbols to color names."""
    symbols = color_symbols(level.colors)
    return "  ".join(f"{symbol}={color}" for color, symbol in symbols.items())
