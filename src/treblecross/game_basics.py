"""
Game basics: board representation, serialization, rules, winner/full checks.
Teaching notes:
- The board is a single row of N cells: ' '=empty, 'X', 'O'. X always starts.
- Lines wrap around the edge: cells N-1, 0, 1 are consecutive.
- A "ply" is a half-move (one player's turn).
"""
from __future__ import annotations

from typing import Iterable, List, Optional

EMPTY = ' '
SYMBOLS = ('X', 'O')
CELL_CHARS = (EMPTY,) + SYMBOLS
LINE_LENGTH = 3


def other_symbol(symbol: str) -> str:
    if symbol not in SYMBOLS:
        raise ValueError(f"Unknown symbol: {symbol!r}")
    return 'O' if symbol == 'X' else 'X'


def serialize_board(cells: Iterable[str]) -> str:
    return ''.join(cells)


def deserialize_board(board_str: str) -> List[str]:
    cells = list(board_str)
    bad = [c for c in cells if c not in CELL_CHARS]
    if bad:
        raise ValueError(f"Invalid cell characters: {sorted(set(bad))!r}")
    return cells


def parse_index(text: str) -> Optional[int]:
    """Plain optionally-signed decimal integer, else None ('1_0', '1.0', '' are rejected)."""
    raw = text.strip()
    digits = raw[1:] if raw[:1] in ('+', '-') else raw
    if not digits.isdecimal():
        return None
    return int(raw)


def line_starts(size: int, symbol: str, cells: List[str]) -> List[int]:
    """Start indices i where cells i, i+1, i+2 (mod size) all hold `symbol`."""
    starts: List[int] = []
    for i in range(size):
        if all(cells[(i + k) % size] == symbol for k in range(LINE_LENGTH)):
            starts.append(i)
    return starts


class Board:
    """Fixed-length row of cells shared by both players for a whole game."""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        self._cells: List[str] = [EMPTY] * size

    @classmethod
    def from_string(cls, board_str: str) -> "Board":
        cells = deserialize_board(board_str)
        board = cls(len(cells))
        board._cells[:] = cells
        return board

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, position: int) -> str:
        return self._cells[position]

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self._cells == other._cells
        if isinstance(other, list):
            return self._cells == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Board({serialize_board(self._cells)!r})"

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> List[str]:
        return self._cells[:]

    def is_valid_move(self, position: object) -> bool:
        if isinstance(position, bool) or not isinstance(position, int):
            return False
        return 0 <= position < len(self._cells) and self._cells[position] == EMPTY

    def place_move(self, position: int, symbol: str) -> None:
        # no bounds/occupancy check: callers validate with is_valid_move first
        self._cells[position] = symbol

    def clear_cell(self, position: int) -> None:
        self._cells[position] = EMPTY

    def has_winning_line(self, symbol: str) -> bool:
        if symbol == EMPTY:
            return False
        return len(line_starts(len(self._cells), symbol, self._cells)) > 0

    def winner(self) -> Optional[str]:
        for s in SYMBOLS:
            if self.has_winning_line(s):
                return s
        return None

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == EMPTY]

    def reset(self) -> None:
        for i in range(len(self._cells)):
            self._cells[i] = EMPTY

    def load_cells(self, cells: List[str]) -> None:
        if len(cells) != len(self._cells):
            raise ValueError(f"Expected {len(self._cells)} cells, got {len(cells)}")
        self._cells[:] = cells

    def copy(self) -> "Board":
        b = Board(len(self._cells))
        b._cells[:] = self._cells
        return b


def render_board(board: Board, ruler: bool = False) -> str:
    lines = ["Board:", ' '.join(board) + ' ']
    if ruler:
        lines.append(' '.join(str(i % 10) for i in range(len(board))))
    return '\n'.join(lines)
