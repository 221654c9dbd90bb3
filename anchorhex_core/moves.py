from __future__ import annotations

from enum import Enum
from typing import AbstractSet, List, Optional

from .board import Board, Cell, Coord, Player
from .hashkey import fingerprint, parse_fingerprint
from .hexgrid import in_bounds
from .reach import mask_coords
from .rules import (
    LegalityPolicy,
    both_players_have_no_legal_moves,
    is_legal_move,
    legal_moves,
    resolve_captures,
)
from .state import GameState


class Rejection(str, Enum):
    OUT_OF_BOUNDS = 'out_of_bounds'
    OCCUPIED = 'occupied'
    ILLEGAL = 'illegal'
    REPETITION = 'repetition'


def place_stone(
    board: Board,
    player: Player,
    r: int,
    c: int,
    forbidden: Optional[AbstractSet[str]] = None,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
) -> Optional[Board]:
    """
    Places a stone and resolves captures for both colours.
    Returns the new board, or None when the move is rejected (out of bounds,
    occupied, illegal, or recreating a position in `forbidden`).
    The input board is never modified.
    """
    if not in_bounds(board.layout, r, c) or board.at(r, c) != Cell.EMPTY:
        return None
    if not is_legal_move(board, player, r, c, forbidden, policy):
        return None
    resolved = resolve_captures(board.with_cell(r, c, player.stone()))
    if forbidden is not None and fingerprint(resolved) in forbidden:
        return None
    return resolved


def rejection_reason(
    board: Board,
    player: Player,
    r: int,
    c: int,
    forbidden: Optional[AbstractSet[str]] = None,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
) -> Optional[Rejection]:
    """Explains why place_stone would reject a move; None when it would be accepted."""
    if not in_bounds(board.layout, r, c):
        return Rejection.OUT_OF_BOUNDS
    if board.at(r, c) != Cell.EMPTY:
        return Rejection.OCCUPIED
    if not is_legal_move(board, player, r, c, None, policy):
        return Rejection.ILLEGAL
    if forbidden is not None:
        resolved = resolve_captures(board.with_cell(r, c, player.stone()))
        if fingerprint(resolved) in forbidden:
            return Rejection.REPETITION
    return None


# ---------- Session helpers over GameState ----------

def session_legal_moves(state: GameState) -> List[Coord]:
    """Legal coordinates for the side to move, row-major."""
    mask = legal_moves(state.board, state.turn, state.forbidden(), state.policy)
    return mask_coords(mask)


def is_game_over(state: GameState) -> bool:
    return both_players_have_no_legal_moves(state.board, state.forbidden(), state.policy)


def play_move(state: GameState, move: Coord) -> Optional[GameState]:
    """Plays a stone for the side to move. Returns the next state, or None if rejected."""
    r, c = move
    nxt = place_stone(state.board, state.turn, r, c, state.forbidden(), state.policy)
    if nxt is None:
        return None
    return GameState(
        board=nxt,
        turn=state.other_player(),
        history=state.history + (fingerprint(nxt),),
        moves=state.moves + ((r, c),),
        policy=state.policy,
        superko=state.superko,
    )


def pass_turn(state: GameState) -> Optional[GameState]:
    """Hands the turn over. Only allowed when the side to move is stuck and the game is not over."""
    if session_legal_moves(state) or is_game_over(state):
        return None
    return GameState(
        board=state.board,
        turn=state.other_player(),
        history=state.history + (state.history[-1],),
        moves=state.moves + (None,),
        policy=state.policy,
        superko=state.superko,
    )


def undo_move(state: GameState) -> Optional[GameState]:
    """Takes back the last ply. Returns None at the start of the game."""
    if not state.moves or len(state.history) < 2:
        return None
    history = state.history[:-1]
    return GameState(
        board=parse_fingerprint(history[-1]),
        turn=state.other_player(),
        history=history,
        moves=state.moves[:-1],
        policy=state.policy,
        superko=state.superko,
    )
