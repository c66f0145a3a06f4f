"""
Debug Utilities

Functions for saving annotated board images and managing debug output.
"""

import hashlib
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .render import ARROW_SYMBOLS
from .solver import BoardState, Level, Solution

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 50

# Image layout
CELL_SIZE = 40
MARGIN = 10
HEADER_HEIGHT = 24

BACKGROUND = "#FFFFFF"
GRID_LINE = "#BDBDBD"
WALL_FILL = "#424242"
ARROW_FILL = "#1976D2"


def get_square_fill(color: str) -> Tuple[int, int, int]:
    """
    Get an RGB fill for a square color.

    Named CSS colors and hex codes are used as-is; any other name gets a
    stable color derived from its hash.

    Args:
        color: Color name from the level

    Returns:
        (r, g, b) tuple
    """
    try:
        return ImageColor.getrgb(color)[:3]
    except ValueError:
        digest = hashlib.md5(color.encode("utf-8")).digest()
        return (64 + digest[0] % 160, 64 + digest[1] % 160, 64 + digest[2] % 160)


def _cell_box(level: Level, x: int, y: int) -> Tuple[int, int, int, int]:
    """Pixel box for a cell; row y = height - 1 is drawn at the top."""
    left = MARGIN + x * CELL_SIZE
    top = HEADER_HEIGHT + MARGIN + (level.height - 1 - y) * CELL_SIZE
    return (left, top, left + CELL_SIZE, top + CELL_SIZE)


def draw_board(level: Level, board: BoardState, title: Optional[str] = None) -> Image.Image:
    """
    Draw a board as an image.

    Annotations include:
    - Grid lines and walls
    - Arrow cells with their direction symbol
    - Squares filled with their color, facing direction marked
    - Optional title line

    Args:
        level: Level geometry
        board: Board to draw
        title: Text for the header line

    Returns:
        PIL Image
    """
    width = 2 * MARGIN + level.width * CELL_SIZE
    height = HEADER_HEIGHT + 2 * MARGIN + level.height * CELL_SIZE
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    if title:
        draw.text((MARGIN, 6), title, fill="black", font=font)

    for y in range(level.height):
        for x in range(level.width):
            box = _cell_box(level, x, y)
            if (x, y) in level.walls:
                draw.rectangle(box, fill=WALL_FILL, outline=GRID_LINE)
                continue
            draw.rectangle(box, outline=GRID_LINE)
            arrow = level.arrow_at((x, y))
            if arrow is not None:
                draw.text((box[0] + 4, box[1] + 2), ARROW_SYMBOLS[arrow], fill=ARROW_FILL, font=font)

    for square in board.squares:
        left, top, right, bottom = _cell_box(level, *square.cell)
        draw.rectangle(
            (left + 6, top + 6, right - 6, bottom - 6),
            fill=get_square_fill(square.color), outline="black"
        )
        draw.text(
            (left + CELL_SIZE // 2 - 3, top + CELL_SIZE // 2 - 6),
            ARROW_SYMBOLS[square.direction], fill="black", font=font
        )

    return image


def save_debug_image(
    level: Level,
    board: BoardState,
    path: Union[str, Path],
    title: Optional[str] = None
) -> Path:
    """
    Save an annotated image of a board.

    Args:
        level: Level geometry
        board: Board to draw
        path: Output file path
        title: Text for the header line

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    draw_board(level, board, title).save(path, "PNG")
    return path


def save_solution_frames(
    level: Level,
    solution: Solution,
    directory: Path = DEBUG_DIR
) -> List[Path]:
    """
    Save one image per board of a solution (initial board first).

    Args:
        level: Level the solution belongs to
        solution: Solved search result
        directory: Output directory

    Returns:
        Paths written, in play order
    """
    # Make room first so the frames written below are never removed
    _cleanup_debug_images(directory, keep=max(MAX_DEBUG_IMAGES - len(solution.board_states), 0))

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
    paths = []
    for index, board in enumerate(solution.board_states):
        if index == 0:
            title = f"start: {board.count_squares()} squares"
        else:
            title = f"move {index}/{solution.move_count}: {solution.moves[index - 1].color}"
        path = directory / f"debug_{stamp}_{index:03d}.png"
        paths.append(save_debug_image(level, board, path, title))

    logger.info(f"Saved {len(paths)} debug images to {directory}")
    return paths


def _cleanup_debug_images(directory: Path = DEBUG_DIR, keep: Optional[int] = None) -> None:
    """Remove old debug images, keeping only the most recent `keep` (default MAX_DEBUG_IMAGES)."""
    if keep is None:
        keep = MAX_DEBUG_IMAGES
    if not directory.exists():
        return

    # Names embed a timestamp, so name order is creation order
    debug_files = sorted(directory.glob("debug_*.png"), reverse=True)

    for old_file in debug_files[keep:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.debug(f"Could not remove {old_file}: {e}")
