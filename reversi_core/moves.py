from __future__ import annotations

from typing import Dict, List

from .board import DIRECTIONS, Board, Coord, Direction, Side
from .errors import OutOfBoundsError


def _run_along(board: Board, side: Side, start: Coord, direction: Direction) -> List[Coord]:
    """Opponent disks captured from ``start`` along one direction, nearest first.

    Empty when the run is empty, hits an empty cell, or runs off the board
    before reaching a disk of ``side``.
    """
    run: List[Coord] = []
    cur = start
    while True:
        try:
            cur = cur.step(direction)
        except OutOfBoundsError:
            return []
        cell = board.get_cell(cur)
        if cell is None:
            return []
        if cell.side is side:
            return run
        run.append(cur)


def captures(board: Board, side: Side, coord: Coord) -> Dict[Direction, List[Coord]]:
    """Maps each capturing direction to the ordered cells ``side`` would flip by playing ``coord``.

    Does not look at whether ``coord`` itself is empty; callers check occupancy first.
    Used both to decide legality (any entry) and to execute a move (flip every entry).
    """
    coord = board.local(coord)
    out: Dict[Direction, List[Coord]] = {}
    for direction in DIRECTIONS:
        run = _run_along(board, side, coord, direction)
        if run:
            out[direction] = run
    return out


def flips_for(board: Board, side: Side, coord: Coord) -> List[Coord]:
    """All cells flipped by the move, in direction order."""
    return [c for run in captures(board, side, coord).values() for c in run]


def is_legal(board: Board, side: Side, coord: Coord) -> bool:
    coord = board.local(coord)
    if board.get_cell(coord) is not None:
        return False
    return any(_run_along(board, side, coord, d) for d in DIRECTIONS)


def legal_moves(board: Board, side: Side) -> List[Coord]:
    """Every legal move for ``side``, in row-major order."""
    return [c for c in board.coords() if is_legal(board, side, c)]


def has_legal_move(board: Board, side: Side) -> bool:
    # Stops at the first hit.
    return any(is_legal(board, side, c) for c in board.coords())
