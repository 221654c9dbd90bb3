from __future__ import annotations

from typing import List, Tuple

from .board import Coord, Layout

# (dr, dc) steps for an even-q offset layout of flat-top hexes.
# Even columns sit half a cell lower than odd columns, so their
# diagonal neighbours are one row down; odd columns reach one row up.
EVEN_COL_DIRS: Tuple[Coord, ...] = ((1, 1), (0, 1), (-1, 0), (0, -1), (1, -1), (1, 0))
ODD_COL_DIRS: Tuple[Coord, ...] = ((0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, 0))


def in_bounds(layout: Layout, r: int, c: int) -> bool:
    return 0 <= r < layout.rows and 0 <= c < layout.cols


def neighbors(layout: Layout, r: int, c: int) -> List[Coord]:
    """Gets the up to six hex neighbours of a cell, in a fixed order."""
    dirs = EVEN_COL_DIRS if c % 2 == 0 else ODD_COL_DIRS
    out: List[Coord] = []
    for dr, dc in dirs:
        nr, nc = r + dr, c + dc
        if in_bounds(layout, nr, nc):
            out.append((nr, nc))
    return out
