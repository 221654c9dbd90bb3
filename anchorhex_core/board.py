from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

Coord = Tuple[int, int]


class Cell(IntEnum):
    """Contents of a single board cell. The integer value doubles as the fingerprint symbol."""
    EMPTY = 0
    WHITE_STONE = 1
    BLACK_STONE = 2
    WHITE_BASE = 3
    BLACK_BASE = 4


class Player(str, Enum):
    WHITE = 'WHITE'
    BLACK = 'BLACK'

    def other(self) -> 'Player':
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    def stone(self) -> Cell:
        return Cell.WHITE_STONE if self is Player.WHITE else Cell.BLACK_STONE

    def base(self) -> Cell:
        return Cell.WHITE_BASE if self is Player.WHITE else Cell.BLACK_BASE


@dataclass(frozen=True)
class Layout:
    """Board dimensions and the fixed base coordinates of both players."""
    rows: int
    cols: int
    white_base: Coord
    black_base: Coord

    def base_pos(self, player: Player) -> Coord:
        return self.white_base if player is Player.WHITE else self.black_base


LAYOUT_10X10 = Layout(rows=10, cols=10, white_base=(0, 4), black_base=(9, 5))
LAYOUT_8X8 = Layout(rows=8, cols=8, white_base=(0, 3), black_base=(7, 4))

LAYOUTS: Dict[int, Layout] = {8: LAYOUT_8X8, 10: LAYOUT_10X10}


def layout_for_size(rows: int, cols: Optional[int] = None) -> Layout:
    """Looks up the layout for a square board size (8 or 10)."""
    cols = rows if cols is None else cols
    layout = LAYOUTS.get(rows)
    if layout is None or layout.cols != cols:
        raise ValueError(f'Unsupported board size {rows}x{cols}; expected 8x8 or 10x10')
    return layout


@dataclass(frozen=True)
class Board:
    """An immutable board: layout plus a row-major grid of cells."""
    layout: Layout
    grid: Tuple[Cell, ...]  # row-major, length == rows * cols

    @property
    def rows(self) -> int:
        return self.layout.rows

    @property
    def cols(self) -> int:
        return self.layout.cols

    def index(self, r: int, c: int) -> int:
        return r * self.layout.cols + c

    def at(self, r: int, c: int) -> Cell:
        return self.grid[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        for r in range(self.layout.rows):
            for c in range(self.layout.cols):
                yield (r, c)

    def with_cell(self, r: int, c: int, cell: Cell) -> 'Board':
        """Returns a copy of the board with one cell replaced."""
        return self.with_cells({(r, c): cell})

    def with_cells(self, changes: Mapping[Coord, Cell]) -> 'Board':
        grid = list(self.grid)
        for (r, c), cell in changes.items():
            grid[self.index(r, c)] = Cell(cell)
        return Board(self.layout, tuple(grid))

    def count(self, cell: Cell) -> int:
        return sum(1 for v in self.grid if v == cell)

    def pretty(self, marks: Optional[Set[Coord]] = None) -> str:
        """Human-readable rendering; coordinates in `marks` are shown as '*' when empty."""
        mset = marks or set()
        lines: List[str] = ['   ' + ' '.join(str(c % 10) for c in range(self.cols))]
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.cols):
                cell = self.at(r, c)
                if cell == Cell.EMPTY and (r, c) in mset:
                    row.append('*')
                else:
                    row.append(CELL_SYMBOLS[cell])
            lines.append(f"{r:2d} " + ' '.join(row))
        return '\n'.join(lines)


CELL_SYMBOLS: Dict[Cell, str] = {
    Cell.EMPTY: '.',
    Cell.WHITE_STONE: 'o',
    Cell.BLACK_STONE: 'x',
    Cell.WHITE_BASE: 'W',
    Cell.BLACK_BASE: 'B',
}
SYMBOL_CELLS: Dict[str, Cell] = {s: cell for cell, s in CELL_SYMBOLS.items()}


def make_initial_board(layout: Layout = LAYOUT_10X10) -> Board:
    """Creates an empty board with both bases in place."""
    grid = [Cell.EMPTY] * (layout.rows * layout.cols)
    wr, wc = layout.white_base
    br, bc = layout.black_base
    grid[wr * layout.cols + wc] = Cell.WHITE_BASE
    grid[br * layout.cols + bc] = Cell.BLACK_BASE
    return Board(layout=layout, grid=tuple(grid))


def board_from_cells(layout: Layout, cells: Sequence[int]) -> Board:
    """Builds a board from a flat row-major cell sequence, validating base placement."""
    if len(cells) != layout.rows * layout.cols:
        raise ValueError(f'Expected {layout.rows * layout.cols} cells, got {len(cells)}')
    try:
        grid = tuple(Cell(int(v)) for v in cells)
    except ValueError as e:
        raise ValueError(f'Invalid cell value: {e}') from e
    board = Board(layout=layout, grid=grid)
    _check_bases(board)
    return board


def board_from_rows(rows: Sequence[str]) -> Board:
    """Builds a board from text rows using the symbols of Board.pretty ('.', 'o', 'x', 'W', 'B').

    Whitespace inside a row is ignored, so rows may be written spaced out.
    """
    cleaned = [''.join(row.split()) for row in rows]
    layout = layout_for_size(len(cleaned), len(cleaned[0]) if cleaned else 0)
    cells: List[int] = []
    for r, row in enumerate(cleaned):
        if len(row) != layout.cols:
            raise ValueError(f'Row {r} has {len(row)} cells, expected {layout.cols}')
        for ch in row:
            if ch not in SYMBOL_CELLS:
                raise ValueError(f'Unknown cell symbol {ch!r} in row {r}')
            cells.append(SYMBOL_CELLS[ch])
    return board_from_cells(layout, cells)


def _check_bases(board: Board) -> None:
    layout = board.layout
    if board.at(*layout.white_base) != Cell.WHITE_BASE or board.at(*layout.black_base) != Cell.BLACK_BASE:
        raise ValueError('Bases must sit at their fixed coordinates')
    if board.count(Cell.WHITE_BASE) != 1 or board.count(Cell.BLACK_BASE) != 1:
        raise ValueError('Expected exactly one base per player')
