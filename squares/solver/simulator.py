"""
Move Simulator - Deterministic effect of triggering one color.

All squares of the triggered color slide simultaneously. Movement is
resolved in lock-step ticks: every still-moving square tries to advance
exactly one cell per tick, collisions are resolved, then the next tick
starts. A step ends once no square is moving.

Per-tick rules for a moving square whose next cell is:
    - out of bounds or a wall: it stops for the rest of the step
    - held by a square of another color: it stops for the rest of the step
    - empty: it advances (arrows redirect it on entry)
    - being vacated this tick: it follows into the cell
    - held by a same-color square that stays put: both are removed

Squares that collide head-on, or converge on one cell in the same tick,
are removed in pairs. All movers share a color, so every collision
between two movers is a same-color collision.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .board import BoardState, Square
from .errors import InvalidMoveError
from .level import Cell, Direction, Level
from .move import Move

logger = logging.getLogger(__name__)

# Per-tick outcomes for a moving square
ADVANCE = "advance"
REMOVE = "remove"
WAIT = "wait"


@dataclass
class _Piece:
    """Mutable working copy of a square during one step."""
    origin: Cell
    color: str
    direction: Direction
    moving: bool


def simulate(level: Level, board: BoardState, color: str) -> Optional[Move]:
    """
    Trigger a color on a board.

    Args:
        level: Static level geometry
        board: Board before the move
        color: Color to trigger

    Returns:
        Move describing the new board, or None when the trigger changes
        nothing (no square of that color, every square blocked, or the
        squares circulate forever through an arrow loop)
    """
    pieces: Dict[Cell, _Piece] = {
        sq.cell: _Piece(sq.cell, sq.color, sq.direction, sq.color == color)
        for sq in board.squares
    }
    if not any(p.moving for p in pieces.values()):
        return None

    removed: List[Cell] = []
    seen: Set[FrozenSet[Tuple[Cell, str, Direction, bool]]] = set()
    ticks = 0

    while any(p.moving for p in pieces.values()):
        snapshot = frozenset(
            (cell, p.color, p.direction, p.moving) for cell, p in pieces.items()
        )
        if snapshot in seen:
            logger.debug(f"Trigger '{color}' never settles after {ticks} ticks, rejecting")
            return None
        seen.add(snapshot)

        pieces = _tick(level, pieces, removed)
        ticks += 1

    moved = tuple(sorted(
        p.origin for cell, p in pieces.items() if cell != p.origin
    ))
    if not moved and not removed:
        return None

    result = BoardState.from_squares(
        Square(cell=cell, color=p.color, direction=p.direction)
        for cell, p in pieces.items()
    )
    return Move(
        color=color,
        board=result,
        moved=moved,
        removed=tuple(sorted(removed)),
        ticks=ticks,
    )


def _tick(level: Level, pieces: Dict[Cell, _Piece], removed: List[Cell]) -> Dict[Cell, _Piece]:
    """
    Advance every moving square by at most one cell.

    Args:
        level: Static level geometry
        pieces: Occupancy at the start of the tick (moving flags are updated in place)
        removed: Origins of annihilated squares, appended to

    Returns:
        Occupancy at the end of the tick
    """
    targets: Dict[Cell, Cell] = {}
    for cell in sorted(c for c, p in pieces.items() if p.moving):
        piece = pieces[cell]
        nxt = piece.direction.step(cell)
        occupant = pieces.get(nxt)
        if not level.is_passable(nxt) or (occupant is not None and occupant.color != piece.color):
            piece.moving = False
        else:
            targets[cell] = nxt

    outcome: Dict[Cell, str] = {}

    for cycle in _find_cycles(targets):
        # Head-on pair annihilates; longer loops rotate
        result = REMOVE if len(cycle) == 2 else ADVANCE
        for cell in cycle:
            outcome[cell] = result

    # Movers hitting a same-color square that stays put. The first mover
    # in canonical order merges with it, the rest wait a tick.
    merged: Set[Cell] = set()
    claims: Dict[Cell, List[Cell]] = {}
    for cell, target in targets.items():
        if target in pieces and target not in targets:
            claims.setdefault(target, []).append(cell)
    for target, claimants in claims.items():
        claimants.sort()
        outcome[claimants[0]] = REMOVE
        for cell in claimants[1:]:
            outcome[cell] = WAIT
        merged.add(target)

    # Chains of followers take the outcome of the square ahead of them
    for start in sorted(targets):
        chain: List[Cell] = []
        node = start
        while node not in outcome:
            target = targets[node]
            if target not in pieces:
                outcome[node] = ADVANCE
                break
            chain.append(node)
            node = target
        leader = outcome[node]
        for cell in reversed(chain):
            outcome[cell] = WAIT if leader == WAIT else ADVANCE
            leader = outcome[cell]

    # Squares converging on one cell annihilate pairwise
    arrivals: Dict[Cell, List[Cell]] = {}
    for cell, result in outcome.items():
        if result == ADVANCE:
            arrivals.setdefault(targets[cell], []).append(cell)
    for target, movers in arrivals.items():
        if len(movers) < 2:
            continue
        movers.sort()
        for cell in movers[:len(movers) - len(movers) % 2]:
            outcome[cell] = REMOVE

    updated: Dict[Cell, _Piece] = {}
    for cell, piece in pieces.items():
        if cell in merged:
            removed.append(piece.origin)
            continue
        result = outcome.get(cell)
        if result == REMOVE:
            removed.append(piece.origin)
        elif result == ADVANCE:
            target = targets[cell]
            arrow = level.arrow_at(target)
            if arrow is not None:
                piece.direction = arrow
            updated[target] = piece
        else:
            updated[cell] = piece

    return updated


def _find_cycles(targets: Dict[Cell, Cell]) -> List[List[Cell]]:
    """
    Find closed loops of movers, each targeting the next one's cell.

    Args:
        targets: mover cell -> cell it wants to enter

    Returns:
        List of cycles, each a list of mover cells
    """
    walk_of: Dict[Cell, Cell] = {}
    cycles: List[List[Cell]] = []

    for start in sorted(targets):
        if start in walk_of:
            continue
        path: List[Cell] = []
        node = start
        while node in targets and node not in walk_of:
            walk_of[node] = start
            path.append(node)
            node = targets[node]
        if node in targets and walk_of.get(node) == start:
            cycles.append(path[path.index(node):])

    return cycles


def successors(level: Level, board: BoardState) -> List[Move]:
    """
    Every valid move from a board, one per color present.

    No-op triggers are left out.

    Args:
        level: Static level geometry
        board: Board to expand

    Returns:
        Moves in sorted color order
    """
    moves = []
    for color in board.colors:
        move = simulate(level, board, color)
        if move is not None:
            moves.append(move)
    return moves


def replay(level: Level, colors: Iterable[str], board: Optional[BoardState] = None) -> BoardState:
    """
    Apply a color sequence and return the final board.

    Args:
        level: Static level geometry
        colors: Colors to trigger, in order
        board: Starting board (defaults to the level's initial state)

    Returns:
        Board after the last trigger

    Raises:
        InvalidMoveError: If any trigger is a no-op
    """
    if board is None:
        board = level.initial_state()

    for index, color in enumerate(colors):
        move = simulate(level, board, color)
        if move is None:
            raise InvalidMoveError(color, index)
        board = move.board

    return board
