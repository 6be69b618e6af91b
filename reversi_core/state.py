from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .board import DEFAULT_SIZE, Board, Cell, Coord, Side
from .errors import CellAlreadyTaken, EndedGame, IllegalMove
from .moves import captures, has_legal_move, is_legal, legal_moves


@dataclass(frozen=True)
class InProgress:
    side: Side


@dataclass(frozen=True)
class Ended:
    pass


ENDED = Ended()

Status = Union[InProgress, Ended]


def _resolve_status(board: Board, first: Side) -> Status:
    """``first`` moves if it can, otherwise its opponent (a pass); ended if neither can or the board is full."""
    if board.is_full():
        return ENDED
    for side in (first, first.opposite()):
        if has_legal_move(board, side):
            return InProgress(side)
    return ENDED


@dataclass(frozen=True)
class Turn:
    """One immutable position of a game: the board, whose move it is, and the running scores.

    A Turn is never modified; ``make_move`` returns a new one, so earlier turns stay
    valid and can be explored independently.
    """
    board: Board
    status: Status
    score_dark: int
    score_light: int

    def __post_init__(self) -> None:
        cells = self.board.size * self.board.size
        for score in (self.score_dark, self.score_light):
            if not 0 <= score <= cells:
                raise ValueError(f"score {score} out of range for a board of {cells} cells")
        if self.score_dark + self.score_light != self.board.occupied():
            raise ValueError("scores do not add up to the disks on the board")

    @classmethod
    def initial(cls, size: int = DEFAULT_SIZE) -> 'Turn':
        """Starting position: the centre cross, Dark to move."""
        board = Board.empty(size)
        h = size // 2
        board = board.place_disk(Side.DARK, board.coord(h - 1, h))
        board = board.place_disk(Side.DARK, board.coord(h, h - 1))
        board = board.place_disk(Side.LIGHT, board.coord(h - 1, h - 1))
        board = board.place_disk(Side.LIGHT, board.coord(h, h))
        return cls(board, InProgress(Side.DARK), 2, 2)

    @classmethod
    def from_board(cls, board: Board, side: Side = Side.DARK) -> 'Turn':
        """Position built from an arbitrary board with ``side`` nominally to move.

        Scores are counted from the board; the status follows the same pass and
        endgame rules as ``make_move``.
        """
        return cls(board, _resolve_status(board, side), board.count(Side.DARK), board.count(Side.LIGHT))

    @property
    def side_to_move(self) -> Optional[Side]:
        return self.status.side if isinstance(self.status, InProgress) else None

    @property
    def is_ended(self) -> bool:
        return isinstance(self.status, Ended)

    @property
    def score(self) -> Tuple[int, int]:
        """(dark, light)"""
        return self.score_dark, self.score_light

    @property
    def score_diff(self) -> int:
        """Light minus Dark."""
        return self.score_light - self.score_dark

    @property
    def tempo(self) -> int:
        """Disks on the board."""
        return self.score_dark + self.score_light

    def get_cell(self, coord: Coord) -> Cell:
        return self.board.get_cell(coord)

    def winner(self) -> Optional[Side]:
        """The side with more disks once the game has ended; None while playing or on a draw."""
        if not self.is_ended or self.score_dark == self.score_light:
            return None
        return Side.DARK if self.score_dark > self.score_light else Side.LIGHT

    def _mover(self, coord: Coord) -> Side:
        status = self.status
        if isinstance(status, Ended):
            raise EndedGame()
        if self.board.get_cell(coord) is not None:
            raise CellAlreadyTaken(coord)
        return status.side

    def check_move(self, coord: Coord) -> None:
        """Raises EndedGame, CellAlreadyTaken, OutOfBoundsError or IllegalMove if ``coord`` can't be played."""
        side = self._mover(coord)
        if not is_legal(self.board, side, coord):
            raise IllegalMove(coord)

    def make_move(self, coord: Coord) -> 'Turn':
        """Plays ``coord`` for the side to move and returns the resulting Turn."""
        side = self._mover(coord)
        runs = captures(self.board, side, coord)
        if not runs:
            raise IllegalMove(coord)
        flipped = [c for run in runs.values() for c in run]
        board = self.board.with_disks(side, flipped).place_disk(side, coord)

        scores: Dict[Side, int] = {Side.DARK: self.score_dark, Side.LIGHT: self.score_light}
        scores[side] += 1 + len(flipped)
        scores[side.opposite()] -= len(flipped)

        if scores[Side.DARK] + scores[Side.LIGHT] == board.size * board.size:
            status: Status = ENDED
        else:
            status = _resolve_status(board, side.opposite())
        return Turn(board, status, scores[Side.DARK], scores[Side.LIGHT])

    def legal_moves(self) -> List[Coord]:
        side = self.side_to_move
        if side is None:
            return []
        return legal_moves(self.board, side)
