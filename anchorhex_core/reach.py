from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, List, Tuple

from .board import Board, Cell, Coord, Player
from .hexgrid import neighbors

Mask = Tuple[Tuple[bool, ...], ...]


class ReachMode(str, Enum):
    STONES_AND_EMPTIES = 'stones+empties'
    EMPTIES_ONLY = 'emptiesOnly'


def reachable_from_base(board: Board, player: Player, mode: ReachMode) -> Mask:
    """
    Marks every cell connected to the player's base.

    STONES_AND_EMPTIES walks through empty cells and the player's own stones;
    EMPTIES_ONLY walks through empty cells only. The base itself is always
    marked. Opponent stones and the opponent base always block.
    """
    layout = board.layout
    visited: List[List[bool]] = [[False] * layout.cols for _ in range(layout.rows)]
    br, bc = layout.base_pos(player)
    visited[br][bc] = True
    queue: Deque[Coord] = deque([(br, bc)])
    if mode is ReachMode.STONES_AND_EMPTIES:
        passable = {Cell.EMPTY, player.base(), player.stone()}
    else:
        passable = {Cell.EMPTY}
    while queue:
        r, c = queue.popleft()
        for nr, nc in neighbors(layout, r, c):
            if visited[nr][nc]:
                continue
            if board.at(nr, nc) in passable:
                visited[nr][nc] = True
                queue.append((nr, nc))
    return tuple(tuple(row) for row in visited)


def mask_any(mask: Mask) -> bool:
    return any(any(row) for row in mask)


def mask_coords(mask: Mask) -> List[Coord]:
    """Lists the set cells of a mask in row-major order."""
    return [(r, c) for r, row in enumerate(mask) for c, ok in enumerate(row) if ok]
