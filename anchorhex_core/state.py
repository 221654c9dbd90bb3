from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .board import Board, Coord, Layout, LAYOUT_10X10, Player, make_initial_board
from .hashkey import fingerprint
from .rules import LegalityPolicy


@dataclass(frozen=True)
class GameState:
    """Represents a game in progress: current board, side to move and the caller-owned history."""
    board: Board
    turn: Player
    history: Tuple[str, ...]  # fingerprint of every position so far, oldest first
    moves: Tuple[Optional[Coord], ...] = ()  # one entry per ply, None for a pass
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE
    superko: bool = True

    def forbidden(self) -> Optional[FrozenSet[str]]:
        return frozenset(self.history) if self.superko else None

    def other_player(self) -> Player:
        return self.turn.other()

    def move_number(self) -> int:
        return len(self.moves) + 1


def new_game(
    layout: Layout = LAYOUT_10X10,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
    superko: bool = True,
    first: Player = Player.BLACK,
) -> GameState:
    board = make_initial_board(layout)
    return GameState(
        board=board,
        turn=first,
        history=(fingerprint(board),),
        policy=policy,
        superko=superko,
    )
