"""treblecross package.

Board rules, move history with undo/redo, save files, players and the turn
loop for a console game of Treblecross.

Convenience imports are exposed for common workflows.
"""

from .game import Game, GameStatus, new_game
from .game_basics import Board
from .history import MoveHistory
from .savefile import load_game, save_game

__all__ = [
    "Board",
    "MoveHistory",
    "Game",
    "GameStatus",
    "new_game",
    "save_game",
    "load_game",
]
