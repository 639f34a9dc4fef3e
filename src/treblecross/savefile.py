"""
Save/load of a game as two lines of text.

Line 1 holds the board cells concatenated in order (a space for an empty
cell), line 2 the move log as cell indices separated by single spaces:

    XX O
    0 1 3

Parsing is strict and happens before any live state is touched, so a bad
file never leaves the board half loaded. The symbol of each logged move is
recovered from the board line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from .errors import SaveFormatError, SaveIOError
from .game_basics import CELL_CHARS, EMPTY, Board, parse_index, serialize_board
from .history import MoveHistory


@dataclass
class SavedGame:
    cells: List[str]
    moves: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.cells)


def dump_game(board: Board, history: MoveHistory) -> str:
    return serialize_board(board) + "\n" + ' '.join(str(m) for m in history.moves()) + "\n"


def parse_game(text: str) -> SavedGame:
    lines = text.splitlines()
    if not lines:
        raise SaveFormatError("Invalid save file format: missing board line")
    board_line = lines[0]
    if not board_line:
        raise SaveFormatError("Invalid save file format: empty board line")
    bad = sorted({c for c in board_line if c not in CELL_CHARS})
    if bad:
        raise SaveFormatError(f"Invalid save file format: unexpected cells {bad!r}")
    if len(lines) < 2:
        raise SaveFormatError("Invalid save file format: missing move history line")

    moves: List[int] = []
    for tok in lines[1].split():
        m = parse_index(tok)
        if m is not None:
            moves.append(m)
        else:
            logging.warning("Skipping unparsable move token %r", tok)

    cells = list(board_line)
    seen = set()
    for m in moves:
        if not 0 <= m < len(cells):
            raise SaveFormatError(f"Move {m} is outside a board of {len(cells)} cells")
        if m in seen:
            raise SaveFormatError(f"Move {m} appears more than once")
        if cells[m] == EMPTY:
            raise SaveFormatError(f"Move {m} points at an empty cell")
        seen.add(m)
    return SavedGame(cells=cells, moves=moves)


def load_text(text: str, board: Board, history: MoveHistory) -> SavedGame:
    saved = parse_game(text)
    if saved.size != len(board):
        raise SaveFormatError(
            f"Saved board has {saved.size} cells but the current board has {len(board)}"
        )
    board.load_cells(saved.cells)
    history.clear()
    for m in saved.moves:
        history.record_move(m, saved.cells[m])
    return saved


def save_game(path: Union[str, Path], board: Board, history: MoveHistory) -> Path:
    p = Path(path)
    try:
        with p.open('w', encoding='utf-8', newline='\n') as f:
            f.write(dump_game(board, history))
    except (OSError, ValueError) as exc:
        # ValueError: names the OS cannot represent, e.g. an embedded NUL
        raise SaveIOError(f"Error saving game: {exc}") from exc
    logging.info("Saved game to %s (%d moves)", p, len(history))
    return p


def read_save(path: Union[str, Path]) -> str:
    p = Path(path)
    try:
        with p.open('r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise SaveFormatError(f"Invalid save file format: not UTF-8 text ({exc.reason})") from exc
    except (OSError, ValueError) as exc:
        raise SaveIOError(f"Error loading game: {exc}") from exc


def load_game(path: Union[str, Path], board: Board, history: MoveHistory) -> SavedGame:
    saved = load_text(read_save(path), board, history)
    logging.info("Loaded game from %s (%d moves)", path, len(saved.moves))
    return saved
