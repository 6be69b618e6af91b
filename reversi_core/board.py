from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import BoardSizeError, EmptyCellError, OccupiedError, OutOfBoundsError

DEFAULT_SIZE = 8
MAX_SIZE = 26  # one column letter per file in algebraic notation

Direction = Tuple[int, int]  # (dr, dc)

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Direction, ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


class Side(Enum):
    """One of the two players; Dark moves first."""
    DARK = "dark"
    LIGHT = "light"

    def opposite(self) -> 'Side':
        """The other side."""
        return Side.LIGHT if self is Side.DARK else Side.DARK

    @property
    def symbol(self) -> str:
        return "X" if self is Side.DARK else "O"


@dataclass(frozen=True)
class Disk:
    """A placed token belonging to one side."""
    side: Side

    def flipped(self) -> 'Disk':
        return Disk(self.side.opposite())


Cell = Optional[Disk]


def check_size(size: int) -> int:
    """Validates a board size: even, between 4 and MAX_SIZE."""
    if size < 4 or size % 2 or size > MAX_SIZE:
        raise BoardSizeError(size)
    return size


@dataclass(frozen=True)
class Coord:
    """A bounds-checked (row, col) position on a size x size grid."""
    row: int
    col: int
    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        if not (0 <= self.row < self.size and 0 <= self.col < self.size):
            raise OutOfBoundsError(self.row, self.col, self.size)

    def step(self, direction: Direction) -> 'Coord':
        """Returns the neighbouring coordinate, raising OutOfBoundsError off the grid."""
        dr, dc = direction
        return Coord(self.row + dr, self.col + dc, self.size)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Board:
    """Immutable size x size grid of cells; 'mutating' operations return a new Board."""
    size: int
    cells: Tuple[Tuple[Cell, ...], ...]  # row-major

    @classmethod
    def empty(cls, size: int = DEFAULT_SIZE) -> 'Board':
        """An all-empty grid; raises BoardSizeError for unsupported sizes."""
        check_size(size)
        return cls(size, tuple(tuple(None for _ in range(size)) for _ in range(size)))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Builds a board from strings of 'X' (dark), 'O' (light) and '.' (empty)."""
        size = check_size(len(rows))
        symbols = {".": None, "X": Disk(Side.DARK), "O": Disk(Side.LIGHT)}
        cells: List[Tuple[Cell, ...]] = []
        for line in rows:
            line = line.replace(" ", "")
            if len(line) != size:
                raise ValueError(f"row {line!r} has {len(line)} cells, expected {size}")
            try:
                cells.append(tuple(symbols[ch] for ch in line.upper()))
            except KeyError as e:
                raise ValueError(f"unknown cell symbol {e.args[0]!r}") from None
        return cls(size, tuple(cells))

    def coord(self, row: int, col: int) -> Coord:
        """A Coord sized for this board."""
        return Coord(row, col, self.size)

    def local(self, coord: Coord) -> Coord:
        """Re-anchors ``coord`` to this board's size, raising OutOfBoundsError if it is off this board."""
        if coord.size != self.size:
            return Coord(coord.row, coord.col, self.size)
        return coord

    def get_cell(self, coord: Coord) -> Cell:
        """The disk at ``coord``, or None if the cell is empty."""
        coord = self.local(coord)
        return self.cells[coord.row][coord.col]

    def get_disk(self, coord: Coord) -> Disk:
        """The disk at ``coord``; raises EmptyCellError on an empty cell."""
        cell = self.get_cell(coord)
        if cell is None:
            raise EmptyCellError(coord)
        return cell

    def _replace(self, changes: Iterable[Tuple[Coord, Cell]]) -> 'Board':
        rows = [list(r) for r in self.cells]
        for coord, cell in changes:
            rows[coord.row][coord.col] = cell
        return Board(self.size, tuple(tuple(r) for r in rows))

    def place_disk(self, side: Side, coord: Coord) -> 'Board':
        """New board with a disk of ``side`` on ``coord``; raises OccupiedError if taken."""
        coord = self.local(coord)
        if self.get_cell(coord) is not None:
            raise OccupiedError(coord)
        return self._replace([(coord, Disk(side))])

    def flip_disk(self, coord: Coord) -> 'Board':
        """New board with the disk on ``coord`` turned over; raises EmptyCellError if empty."""
        coord = self.local(coord)
        disk = self.get_disk(coord)
        return self._replace([(coord, disk.flipped())])

    def with_disks(self, side: Side, coords: Iterable[Coord]) -> 'Board':
        """Sets every coord to a disk of ``side`` in a single copy, without occupancy checks."""
        coords = [self.local(c) for c in coords]
        return self._replace((c, Disk(side)) for c in coords)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Full-grid snapshot, row-major."""
        return self.cells

    def coords(self) -> Iterator[Coord]:
        for r in range(self.size):
            for c in range(self.size):
                yield Coord(r, c, self.size)

    def count(self, side: Side) -> int:
        """Number of disks of ``side`` on the board."""
        return sum(1 for row in self.cells for cell in row if cell is not None and cell.side is side)

    def occupied(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def is_full(self) -> bool:
        return self.occupied() == self.size * self.size

    def pretty(self, marks: Optional[Iterable[Coord]] = None) -> str:
        """Human-readable grid with column letters and 1-based row numbers; marks render as '*'."""
        mset = {(m.row, m.col) for m in (marks or ())}
        header = "   " + " ".join(chr(ord("a") + c) for c in range(self.size))
        lines = [header]
        for r, row in enumerate(self.cells):
            out: List[str] = []
            for c, cell in enumerate(row):
                if cell is not None:
                    out.append(cell.side.symbol)
                elif (r, c) in mset:
                    out.append("*")
                else:
                    out.append(".")
            lines.append(f"{r + 1:>2} " + " ".join(out))
        return "\n".join(lines)
