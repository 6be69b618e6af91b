from __future__ import annotations

from .board import DEFAULT_SIZE, Coord


class NotationError(ValueError):
    pass


def parse_coord(text: str, size: int = DEFAULT_SIZE) -> Coord:
    """Parses 'd3' (column letter, 1-based row) or 'r,c' / 'r c' (0-based).

    Raises NotationError for unparseable text and OutOfBoundsError for off-grid cells.
    """
    s = text.strip().lower()
    if not s:
        raise NotationError("empty move")
    if s[0].isalpha():
        if not s[1:].isdecimal():
            raise NotationError(f"could not parse {text!r}")
        return Coord(int(s[1:]) - 1, ord(s[0]) - ord("a"), size)
    sep = "," if "," in s else " "
    parts = [t for t in s.split(sep) if t.strip() != ""]
    try:
        r_s, c_s = parts
        row, col = int(r_s), int(c_s)
    except ValueError:
        raise NotationError(f"could not parse {text!r}") from None
    return Coord(row, col, size)


def format_coord(coord: Coord) -> str:
    return f"{chr(ord('a') + coord.col)}{coord.row + 1}"
