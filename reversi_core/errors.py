from __future__ import annotations


class ReversiError(Exception):
    """Base class for every error raised by the engine."""


class BoardError(ReversiError, ValueError):
    """Bad input to the board: off-grid coordinates or wrong occupancy."""


class OutOfBoundsError(BoardError):
    """A coordinate, or a step from one, falls outside the grid."""
    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class OccupiedError(BoardError):
    """A disk was placed on a cell that already holds one."""
    def __init__(self, coord) -> None:
        super().__init__(f"cell {coord} is already occupied")
        self.coord = coord


class EmptyCellError(BoardError):
    """A disk was read or flipped on an empty cell."""
    def __init__(self, coord) -> None:
        super().__init__(f"cell {coord} is empty")
        self.coord = coord


class BoardSizeError(BoardError):
    """Board size is odd, too small or too large."""
    def __init__(self, size: int) -> None:
        super().__init__(f"board size must be an even number from 4 to 26, got {size}")
        self.size = size


class MoveError(ReversiError):
    """A move was rejected by the rules. The caller should re-prompt."""


class EndedGame(MoveError):
    """A move was attempted after the game ended."""
    def __init__(self) -> None:
        super().__init__("the game has ended")


class CellAlreadyTaken(MoveError):
    """The target cell of a move is occupied."""
    def __init__(self, coord) -> None:
        super().__init__(f"cell {coord} is already taken")
        self.coord = coord


class IllegalMove(MoveError):
    """The move flips nothing in any direction."""
    def __init__(self, coord) -> None:
        super().__init__(f"move at {coord} captures nothing")
        self.coord = coord
