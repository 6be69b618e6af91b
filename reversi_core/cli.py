from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import DEFAULT_SIZE, Side
from .errors import ReversiError
from .notation import format_coord, parse_coord
from .state import Turn

logger = logging.getLogger(__name__)


def side_name(side: Side) -> str:
    return f"{side.value.capitalize()} ({side.symbol})"


def render(turn: Turn, hints: bool = False) -> str:
    marks = turn.legal_moves() if hints else None
    lines = [turn.board.pretty(marks)]
    lines.append(f"Dark {turn.score_dark} - Light {turn.score_light}")
    if turn.side_to_move is not None:
        lines.append(f"{side_name(turn.side_to_move)} to move")
    return "\n".join(lines)


def announce_result(turn: Turn) -> str:
    winner = turn.winner()
    if winner is None:
        return f"Game over: draw at {turn.score_dark}-{turn.score_light}."
    return f"Game over: {side_name(winner)} wins {turn.score_dark}-{turn.score_light}."


def play(turn: Turn, text: str) -> Turn:
    """Applies one move given as text; passes are reported when the same side moves again."""
    size = turn.board.size
    coord = parse_coord(text, size)
    mover = turn.side_to_move
    nxt = turn.make_move(coord)
    logger.debug("%s played %s", mover, format_coord(coord))
    if mover is not None and nxt.side_to_move is mover:
        print(f"{side_name(mover.opposite())} has no legal move and passes.")
    return nxt


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Two-player Reversi in the terminal')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size (even, >= 4)')
    parser.add_argument('--hints', action='store_true', help='Mark legal moves on the board')
    parser.add_argument('--moves', default='', help='Opening moves to play first, e.g. "d3 c5"')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        turn = Turn.initial(args.size)
        for text in args.moves.split():
            turn = play(turn, text)
    except ReversiError as e:
        print(f"error: {e}")
        return 2

    while not turn.is_ended:
        print(render(turn, args.hints))
        try:
            text = input('Enter your move (e.g. d3 or r,c; "quit" to stop): ').strip()
        except EOFError:
            print()
            return 1
        if text.lower() in ('quit', 'exit', 'q'):
            return 1
        try:
            turn = play(turn, text)
        except ReversiError as e:
            print(f"Illegal move: {e}. Try again.")
        except ValueError as e:
            print(f"Could not parse: {e}. Try again.")

    print(render(turn))
    print(announce_result(turn))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
