from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Dict, List, Optional, Tuple

from .board import Board, Cell, Coord, Player
from .hashkey import fingerprint
from .hexgrid import in_bounds
from .reach import Mask, ReachMode, mask_any, reachable_from_base


class LegalityPolicy(str, Enum):
    """How an empty cell is judged playable.

    STRICT: the cell must already be connected to the player's base.
    PERMISSIVE: the placement is simulated with one capture-resolution pass
    and the stone must survive it.
    """
    STRICT = 'strict'
    PERMISSIVE = 'permissive'


def parse_policy(name: str) -> LegalityPolicy:
    try:
        return LegalityPolicy(str(name).lower())
    except ValueError:
        raise ValueError(f'Unknown legality policy {name!r}') from None


def resolve_captures(board: Board) -> Board:
    """Removes every stone that is cut off from its own base.

    Both colours are judged against the same, unresolved board.
    """
    white_reach = reachable_from_base(board, Player.WHITE, ReachMode.STONES_AND_EMPTIES)
    black_reach = reachable_from_base(board, Player.BLACK, ReachMode.STONES_AND_EMPTIES)
    changes: Dict[Coord, Cell] = {}
    for r, c in board.coords():
        v = board.at(r, c)
        if v == Cell.WHITE_STONE and not white_reach[r][c]:
            changes[(r, c)] = Cell.EMPTY
        elif v == Cell.BLACK_STONE and not black_reach[r][c]:
            changes[(r, c)] = Cell.EMPTY
    if not changes:
        return board
    return board.with_cells(changes)


def _simulate(board: Board, player: Player, r: int, c: int) -> Board:
    return resolve_captures(board.with_cell(r, c, player.stone()))


def _is_legal_with_reach(
    board: Board,
    player: Player,
    r: int,
    c: int,
    reach: Mask,
    forbidden: Optional[AbstractSet[str]],
    policy: LegalityPolicy,
) -> bool:
    if board.at(r, c) != Cell.EMPTY:
        return False
    baseline = reach[r][c]
    if policy is LegalityPolicy.STRICT:
        if not baseline:
            return False
        if forbidden is None:
            return True
        return fingerprint(_simulate(board, player, r, c)) not in forbidden
    if baseline and forbidden is None:
        return True
    after = _simulate(board, player, r, c)
    if after.at(r, c) != player.stone():
        return False
    return forbidden is None or fingerprint(after) not in forbidden


def is_legal_move(
    board: Board,
    player: Player,
    r: int,
    c: int,
    forbidden: Optional[AbstractSet[str]] = None,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
) -> bool:
    """Checks a single placement. Out-of-bounds and occupied cells are never legal."""
    if not in_bounds(board.layout, r, c):
        return False
    reach = reachable_from_base(board, player, ReachMode.STONES_AND_EMPTIES)
    return _is_legal_with_reach(board, player, r, c, reach, forbidden, policy)


def legal_moves(
    board: Board,
    player: Player,
    forbidden: Optional[AbstractSet[str]] = None,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
) -> Mask:
    """Legal-move mask for a player.

    When `forbidden` is given, moves whose resolved position has a fingerprint
    in it are excluded (positional superko).
    """
    reach = reachable_from_base(board, player, ReachMode.STONES_AND_EMPTIES)
    return tuple(
        tuple(
            _is_legal_with_reach(board, player, r, c, reach, forbidden, policy)
            for c in range(board.cols)
        )
        for r in range(board.rows)
    )


def both_players_have_no_legal_moves(
    board: Board,
    forbidden: Optional[AbstractSet[str]] = None,
    policy: LegalityPolicy = LegalityPolicy.PERMISSIVE,
) -> bool:
    """Terminal test: neither colour has a legal placement."""
    return not (
        mask_any(legal_moves(board, Player.WHITE, forbidden, policy))
        or mask_any(legal_moves(board, Player.BLACK, forbidden, policy))
    )


@dataclass(frozen=True)
class AreaScore:
    white_total: int
    black_total: int
    white_stones: int
    black_stones: int
    white_territory: int
    black_territory: int

    @property
    def winner(self) -> Optional[Player]:
        """The leading player, or None on a draw."""
        if self.white_total > self.black_total:
            return Player.WHITE
        if self.black_total > self.white_total:
            return Player.BLACK
        return None


def territory_masks(board: Board) -> Tuple[Mask, Mask]:
    """Empty cells reachable by empty-only paths from exactly one base: (white, black)."""
    w_empty = reachable_from_base(board, Player.WHITE, ReachMode.EMPTIES_ONLY)
    b_empty = reachable_from_base(board, Player.BLACK, ReachMode.EMPTIES_ONLY)
    white: List[Tuple[bool, ...]] = []
    black: List[Tuple[bool, ...]] = []
    for r in range(board.rows):
        w_row: List[bool] = []
        b_row: List[bool] = []
        for c in range(board.cols):
            empty = board.at(r, c) == Cell.EMPTY
            wr, br = w_empty[r][c], b_empty[r][c]
            w_row.append(empty and wr and not br)
            b_row.append(empty and br and not wr)
        white.append(tuple(w_row))
        black.append(tuple(b_row))
    return tuple(white), tuple(black)


def compute_area_score(board: Board) -> AreaScore:
    """Area scoring: stones on board plus exclusively reachable empty territory."""
    white_terr, black_terr = territory_masks(board)
    w_stones = board.count(Cell.WHITE_STONE)
    b_stones = board.count(Cell.BLACK_STONE)
    w_terr = sum(sum(row) for row in white_terr)
    b_terr = sum(sum(row) for row in black_terr)
    return AreaScore(
        white_total=w_stones + w_terr,
        black_total=b_stones + b_terr,
        white_stones=w_stones,
        black_stones=b_stones,
        white_territory=w_terr,
        black_territory=b_terr,
    )
