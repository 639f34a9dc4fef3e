"""
Tactics and simple motifs: immediate wins/blocks, safety checks.
Teaching notes:
- On a row board a mark next to (or one gap away from) another friendly mark
  creates a threat; local motifs are enough for useful hints.
- Everything here works on a copy of the board and never mutates the caller's.
"""
from typing import List

from .game_basics import Board, other_symbol


def immediate_winning_moves(board: Board, symbol: str) -> List[int]:
    wins: List[int] = []
    for i in board.empty_cells():
        b = board.copy()
        b.place_move(i, symbol)
        if b.has_winning_line(symbol):
            wins.append(i)
    return wins


def gives_opponent_immediate_win(board: Board, symbol: str, move: int) -> bool:
    if not board.is_valid_move(move):
        return False
    b = board.copy()
    b.place_move(move, symbol)
    if b.has_winning_line(symbol):
        return False
    return len(immediate_winning_moves(b, other_symbol(symbol))) > 0


def safe_moves(board: Board, symbol: str) -> List[int]:
    return [i for i in board.empty_cells() if not gives_opponent_immediate_win(board, symbol, i)]


def blocking_moves(board: Board, symbol: str) -> List[int]:
    """Moves after which the opponent no longer has an immediate win."""
    opp = other_symbol(symbol)
    if not immediate_winning_moves(board, opp):
        return []
    blocks: List[int] = []
    for i in board.empty_cells():
        b = board.copy()
        b.place_move(i, symbol)
        if not immediate_winning_moves(b, opp):
            blocks.append(i)
    return blocks


def suggest_moves(board: Board, symbol: str) -> List[int]:
    wins = immediate_winning_moves(board, symbol)
    if wins:
        return wins
    blocks = blocking_moves(board, symbol)
    if blocks:
        return blocks
    safe = safe_moves(board, symbol)
    if safe:
        return safe
    return board.empty_cells()


def format_hints(board: Board, symbol: str) -> str:
    if not board.empty_cells():
        return "No moves left."
    wins = immediate_winning_moves(board, symbol)
    if wins:
        return f"Winning moves for {symbol}: {wins}"
    blocks = blocking_moves(board, symbol)
    if blocks:
        return f"{other_symbol(symbol)} threatens to win; block with: {blocks}"
    safe = safe_moves(board, symbol)
    if safe:
        return f"Safe moves for {symbol}: {safe}"
    return f"Every move hands {other_symbol(symbol)} a win. Pick any of {board.empty_cells()}"
