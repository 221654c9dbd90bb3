from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        GameState,
        LegalityPolicy,
        Player,
        ReachMode,
        compute_area_score,
        is_game_over,
        layout_for_size,
        new_game,
        parse_fingerprint,
        parse_policy,
        pass_turn,
        play_move,
        reachable_from_base,
        rejection_reason,
        session_legal_moves,
        territory_masks,
        undo_move,
    )
except ImportError:
    from game import (  # type: ignore
        GameState,
        LegalityPolicy,
        Player,
        ReachMode,
        compute_area_score,
        is_game_over,
        layout_for_size,
        new_game,
        parse_fingerprint,
        parse_policy,
        pass_turn,
        play_move,
        reachable_from_base,
        rejection_reason,
        session_legal_moves,
        territory_masks,
        undo_move,
    )


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUE


def _json_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str) and value.lower() in _TRUE + _FALSE:
        return value.lower() in _TRUE
    raise ValueError(f"not a boolean flag: {value!r}")


DEFAULT_SIZE = int(os.getenv("ANCHORHEX_SIZE", "10"))
DEFAULT_POLICY = os.getenv("ANCHORHEX_POLICY", LegalityPolicy.PERMISSIVE.value)
DEFAULT_SUPERKO = _env_flag("ANCHORHEX_SUPERKO", "1")

app = Flask(__name__)


# ---------- JSON conversion ----------

def mask_to_json(mask) -> List[List[bool]]:
    return [[bool(v) for v in row] for row in mask]


def board_to_json(board) -> List[List[int]]:
    return [[int(board.at(r, c)) for c in range(board.cols)] for r in range(board.rows)]


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "size": s.board.rows,
        "policy": s.policy.value,
        "superko": bool(s.superko),
        "turn": s.turn.value,
        "moveNumber": s.move_number(),
        "board": board_to_json(s.board),
        "history": list(s.history),
        "moves": [None if m is None else [int(m[0]), int(m[1])] for m in s.moves],
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    """Rebuilds a GameState from its JSON form. The board is taken from the last history entry.

    Every history entry is parsed so that undo never meets a bad fingerprint later on.
    """
    history = tuple(str(h) for h in obj["history"])
    if not history:
        raise ValueError("history must not be empty")
    boards = [parse_fingerprint(h) for h in history]
    board = boards[-1]
    if any(b.layout != board.layout for b in boards):
        raise ValueError("history mixes board layouts")
    moves: List[Optional[Tuple[int, int]]] = []
    for m in obj.get("moves", []):
        if m is None:
            moves.append(None)
            continue
        if not isinstance(m, (list, tuple)) or len(m) != 2:
            raise ValueError(f"move must be [row, col] or null: {m!r}")
        moves.append((int(m[0]), int(m[1])))
    if len(moves) != len(history) - 1:
        raise ValueError("moves and history lengths disagree")
    return GameState(
        board=board,
        turn=Player(str(obj["turn"]).upper()),
        history=history,
        moves=tuple(moves),
        policy=parse_policy(obj.get("policy", DEFAULT_POLICY)),
        superko=_json_flag(obj.get("superko", DEFAULT_SUPERKO)),
    )


def score_to_json(s: GameState) -> Dict[str, Any]:
    score = compute_area_score(s.board)
    return {
        "white": score.white_total,
        "black": score.black_total,
        "breakdown": {
            "whiteStones": score.white_stones,
            "blackStones": score.black_stones,
            "whiteTerritory": score.white_territory,
            "blackTerritory": score.black_territory,
        },
        "winner": score.winner.value if score.winner else None,
    }


def _coords_json(moves) -> List[List[int]]:
    return [[int(r), int(c)] for (r, c) in moves]


def _state_payload(s: GameState) -> Dict[str, Any]:
    return {
        "ok": True,
        "state": state_to_json(s),
        "legalMoves": _coords_json(session_legal_moves(s)),
        "score": score_to_json(s),
        "gameOver": is_game_over(s),
    }


def _read_state() -> Tuple[Optional[GameState], Any]:
    body = request.get_json(force=True, silent=True) or {}
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        return json_to_state(s_in), None
    except (KeyError, TypeError, ValueError) as e:
        app.logger.warning("rejected malformed state: %s", e)
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        layout = layout_for_size(int(body.get("size", DEFAULT_SIZE)))
        policy = parse_policy(body.get("policy", DEFAULT_POLICY))
        superko = _json_flag(body.get("superko", DEFAULT_SUPERKO))
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    state = new_game(layout=layout, policy=policy, superko=superko)
    return jsonify(_state_payload(state))


@app.post("/api/legal")
def api_legal() -> Any:
    state, err = _read_state()
    if err:
        return err
    return jsonify({"ok": True, "legalMoves": _coords_json(session_legal_moves(state))})


@app.post("/api/move")
def api_move() -> Any:
    state, err = _read_state()
    if err:
        return err
    body = request.get_json(force=True, silent=True) or {}
    try:
        r, c = (int(v) for v in body["move"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"ok": False, "error": "move must be [row, col]"}), 400
    next_state = play_move(state, (r, c))
    if next_state is None:
        reason = rejection_reason(state.board, state.turn, r, c, state.forbidden(), state.policy)
        app.logger.info("rejected move %s at (%d, %d): %s", state.turn.value, r, c, reason.value if reason else "illegal")
        return jsonify({
            "ok": False,
            "error": "Illegal move",
            "reason": reason.value if reason else "illegal",
            "legalMoves": _coords_json(session_legal_moves(state)),
        }), 400
    return jsonify(_state_payload(next_state))


@app.post("/api/pass")
def api_pass() -> Any:
    state, err = _read_state()
    if err:
        return err
    next_state = pass_turn(state)
    if next_state is None:
        return jsonify({"ok": False, "error": "Cannot pass while legal moves remain"}), 400
    return jsonify(_state_payload(next_state))


@app.post("/api/undo")
def api_undo() -> Any:
    state, err = _read_state()
    if err:
        return err
    prev = undo_move(state)
    if prev is None:
        return jsonify({"ok": False, "error": "Nothing to undo"}), 400
    return jsonify(_state_payload(prev))


@app.post("/api/reach")
def api_reach() -> Any:
    state, err = _read_state()
    if err:
        return err
    body = request.get_json(force=True, silent=True) or {}
    try:
        player = Player(str(body.get("player", state.turn.value)).upper())
        mode = ReachMode(body.get("mode", ReachMode.STONES_AND_EMPTIES.value))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    mask = reachable_from_base(state.board, player, mode)
    return jsonify({"ok": True, "player": player.value, "mode": mode.value, "mask": mask_to_json(mask)})


@app.post("/api/score")
def api_score() -> Any:
    state, err = _read_state()
    if err:
        return err
    white, black = territory_masks(state.board)
    return jsonify({
        "ok": True,
        "score": score_to_json(state),
        "territory": {"white": mask_to_json(white), "black": mask_to_json(black)},
        "gameOver": is_game_over(state),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
