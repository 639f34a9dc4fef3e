"""
Move history: chronological log plus undo/redo stacks.
Teaching notes:
- Every record is a (position, symbol) pair, so redo restores the mark that
  was actually played rather than whoever happens to be asking.
- A fresh move invalidates the redo stack: history stays linear.
- Positions are unique within the log (an occupied cell cannot be replayed),
  which is what makes removal by value on undo safe.
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from .errors import DuplicateMoveError
from .game_basics import Board


class MoveRecord(NamedTuple):
    position: int
    symbol: Optional[str]


class MoveHistory:
    def __init__(self) -> None:
        self._log: List[MoveRecord] = []
        self._undo: List[MoveRecord] = []
        self._redo: List[MoveRecord] = []

    def __len__(self) -> int:
        return len(self._log)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record_move(self, position: int, symbol: Optional[str] = None) -> MoveRecord:
        if any(r.position == position for r in self._log):
            raise DuplicateMoveError(f"Cell {position} is already in the move log")
        rec = MoveRecord(position, symbol)
        self._log.append(rec)
        self._undo.append(rec)
        self._redo.clear()
        logging.debug("recorded move %s", rec)
        return rec

    def undo(self, board: Board) -> Optional[MoveRecord]:
        if not self._undo:
            return None
        rec = self._undo.pop()
        # first match by value; unique by construction
        for i, r in enumerate(self._log):
            if r.position == rec.position:
                del self._log[i]
                break
        self._redo.append(rec)
        board.clear_cell(rec.position)
        logging.debug("undid move %s", rec)
        return rec

    def redo(self, board: Board, symbol: Optional[str] = None) -> Optional[MoveRecord]:
        if not self._redo:
            return None
        if self._redo[-1].symbol is None and symbol is None:
            raise ValueError(f"Redo of cell {self._redo[-1].position} needs a symbol")
        rec = self._redo.pop()
        if rec.symbol is None:
            rec = MoveRecord(rec.position, symbol)
        elif symbol is not None and symbol != rec.symbol:
            logging.debug("redo of cell %d keeps recorded symbol %s (caller asked %s)",
                          rec.position, rec.symbol, symbol)
        self._log.append(rec)
        self._undo.append(rec)
        if rec.symbol is not None:
            board.place_move(rec.position, rec.symbol)
        logging.debug("redid move %s", rec)
        return rec

    def clear(self) -> None:
        self._log.clear()
        self._undo.clear()
        self._redo.clear()

    def moves(self) -> List[int]:
        return [r.position for r in self._log]

    def records(self) -> List[MoveRecord]:
        return list(self._log)

    def last_symbol(self) -> Optional[str]:
        return self._log[-1].symbol if self._log else None

    def format_history(self) -> str:
        return "Move History:\n" + ' '.join(str(p) for p in self.moves())
