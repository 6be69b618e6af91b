from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from reversi_core.board import Board, Side
from reversi_core.errors import ReversiError
from reversi_core.notation import format_coord, parse_coord
from reversi_core.state import ENDED, InProgress, Status, Turn

logger = logging.getLogger(__name__)

DEFAULT_SIZE = int(os.getenv("REVERSI_BOARD_SIZE", "8"))

app = Flask(__name__)


def board_to_json(b: Board) -> List[str]:
    return ["".join("." if cell is None else cell.side.symbol for cell in row) for row in b.rows()]


def state_to_json(t: Turn) -> Dict[str, Any]:
    side = t.side_to_move
    winner = t.winner()
    return {
        "size": t.board.size,
        "rows": board_to_json(t.board),
        "toMove": side.value if side is not None else None,
        "ended": t.is_ended,
        "score": {"dark": t.score_dark, "light": t.score_light},
        "winner": winner.value if winner is not None else None,
    }


def json_to_state(obj: Dict[str, Any]) -> Turn:
    """Rebuilds a Turn from client JSON; raises ValueError if ``toMove`` contradicts the board."""
    board = Board.from_rows([str(r) for r in obj["rows"]])
    to_move: Optional[str] = obj.get("toMove")
    claimed: Status = ENDED if to_move is None else InProgress(Side(to_move))
    turn = Turn.from_board(board, Side(to_move) if to_move is not None else Side.DARK)
    if turn.status != claimed:
        actual = "ended" if turn.is_ended else f"{turn.side_to_move.value} to move"
        raise ValueError(f"toMove {to_move!r} does not match the board ({actual})")
    return turn


def _legal(t: Turn) -> List[str]:
    return [format_coord(c) for c in t.legal_moves()]


def _bad_request(error: str, **extra: Any) -> Any:
    return jsonify({"ok": False, "error": error, **extra}), 400


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        turn = Turn.initial(int(body.get("size", DEFAULT_SIZE)))
    except (TypeError, ValueError) as e:
        return _bad_request(f"bad size: {e}")
    logger.info("new game on a %dx%d board", turn.board.size, turn.board.size)
    return jsonify({"ok": True, "state": state_to_json(turn), "legalMoves": _legal(turn)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        turn = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "legalMoves": _legal(turn)})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        turn = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    move = body.get("move")
    try:
        if isinstance(move, list) and len(move) == 2:
            coord = turn.board.coord(int(move[0]), int(move[1]))
        else:
            coord = parse_coord(str(move), turn.board.size)
        next_turn = turn.make_move(coord)
    except (ReversiError, TypeError, ValueError) as e:
        return _bad_request(str(e), legalMoves=_legal(turn))
    logger.debug("%s played %s", turn.side_to_move, format_coord(coord))
    if next_turn.is_ended:
        logger.info("game over at %d-%d", next_turn.score_dark, next_turn.score_light)
    return jsonify({
        "ok": True,
        "move": format_coord(coord),
        "state": state_to_json(next_turn),
        "legalMoves": _legal(next_turn),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
