"""
Reversi core Python package.

Pure rules engine with no I/O; shells (cli.py, app.py) drive it through Turn.
Modules:
- board.py: Side, Disk, Coord, Board
- moves.py: the 8-direction capture scan and legal-move helpers
- state.py: Status, Turn
- notation.py: coordinate parsing/formatting for shells
- errors.py: exception hierarchy
"""
from .board import DEFAULT_SIZE, DIRECTIONS, Board, Coord, Disk, Side
from .errors import (
    BoardError,
    BoardSizeError,
    CellAlreadyTaken,
    EmptyCellError,
    EndedGame,
    IllegalMove,
    MoveError,
    OccupiedError,
    OutOfBoundsError,
    ReversiError,
)
from .state import ENDED, Ended, InProgress, Status, Turn
