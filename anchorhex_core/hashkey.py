from __future__ import annotations

from .board import Board, board_from_cells, layout_for_size

ROW_SEP = '/'


def fingerprint(board: Board) -> str:
    """Canonical position key: cell digits row by row, rows separated by '/'.

    Two boards share a fingerprint iff every cell matches. Side to move is not part of the key.
    """
    cols = board.cols
    return ROW_SEP.join(
        ''.join(str(int(v)) for v in board.grid[r * cols:(r + 1) * cols])
        for r in range(board.rows)
    )


def parse_fingerprint(key: str) -> Board:
    """Rebuilds the board a fingerprint was taken from."""
    rows = key.split(ROW_SEP)
    if not rows or not rows[0]:
        raise ValueError('Empty fingerprint')
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError('Ragged fingerprint rows')
    if not all(ch.isdigit() for row in rows for ch in row):
        raise ValueError(f'Malformed fingerprint: {key!r}')
    layout = layout_for_size(len(rows), width)
    return board_from_cells(layout, [int(ch) for row in rows for ch in row])
