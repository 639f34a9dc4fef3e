"""
Move selection for the two kinds of player.

Both expose get_move(game) -> int, returning a cell index or NO_MOVE. The
game owns the board and history; players only borrow them for the call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from .console import Console
from .errors import SaveError
from .game_basics import parse_index
from .paths import resolve_save_path
from .savefile import load_game, save_game
from .tactics import format_hints, suggest_moves

if TYPE_CHECKING:
    from .game import Game

NO_MOVE = -1
MENU_TOKEN = "#"

MENU_TEXT = "\n".join([
    "Menu:",
    "1. Save game",
    "2. Load game",
    "3. Get hints",
    "4. Show Move History",
    "5. Undo Move",
    "6. Redo Move",
])


@dataclass(eq=False)
class HumanPlayer:
    symbol: str
    number: int
    console: Console = field(default_factory=Console)

    kind = "human"

    def get_move(self, game: "Game") -> int:
        size = len(game.board)
        while True:
            raw = self.console.read_line(
                f"Player {self.number} ({self.symbol}), enter the cell number "
                f"(0 - {size - 1}) or '{MENU_TOKEN}' for menu:"
            ).strip()
            if raw == MENU_TOKEN:
                if self.run_menu(game):
                    return NO_MOVE
                continue
            cell = parse_index(raw)
            if cell is not None and game.board.is_valid_move(cell):
                return cell
            self.console.write("Invalid move! Try again.")

    def run_menu(self, game: "Game") -> bool:
        """Show the menu and run one action. True if the game state changed."""
        self.console.write(MENU_TEXT)
        choice = self.console.read_line().strip()
        changed = False
        if choice == "1":
            self._save(game)
        elif choice == "2":
            changed = self._load(game)
        elif choice == "3":
            self.console.write(format_hints(game.board, self.symbol))
        elif choice == "4":
            self.console.write(game.history.format_history())
        elif choice == "5":
            changed = self._take_back(game)
        elif choice == "6":
            changed = self._replay(game)
        else:
            self.console.write("Invalid choice!")
        game.display()
        return changed

    def _save(self, game: "Game") -> None:
        name = self.console.read_line("Enter the file name to save:").strip()
        if not name:
            self.console.write("No file name given.")
            return
        try:
            save_game(resolve_save_path(name, game.save_dir), game.board, game.history)
        except SaveError as exc:
            self.console.write(str(exc))
            return
        self.console.write("Game saved successfully!")

    def _load(self, game: "Game") -> bool:
        name = self.console.read_line("Enter the file name to load:").strip()
        if not name:
            self.console.write("No file name given.")
            return False
        try:
            load_game(resolve_save_path(name, game.save_dir), game.board, game.history)
        except SaveError as exc:
            self.console.write(str(exc))
            return False
        self.console.write("Game loaded successfully!")
        return True

    def _take_back(self, game: "Game") -> bool:
        # undo plies until it is this player's turn again
        undone = 0
        while game.history.can_undo:
            game.history.undo(game.board)
            undone += 1
            if game.to_move() is self:
                break
        if not undone:
            self.console.write("Nothing to undo.")
            return False
        self.console.write(game.history.format_history())
        return True

    def _replay(self, game: "Game") -> bool:
        redone = 0
        while game.history.can_redo:
            game.history.redo(game.board, game.to_move().symbol)
            redone += 1
            if game.to_move() is self or game.board.winner() is not None:
                break
        if not redone:
            self.console.write("Nothing to redo.")
            return False
        self.console.write(game.history.format_history())
        return True


@dataclass(eq=False)
class ComputerPlayer:
    symbol: str
    number: int
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    strategy: str = "random"

    kind = "computer"

    def get_move(self, game: "Game") -> int:
        if self.strategy == "tactical":
            moves = suggest_moves(game.board, self.symbol)
        else:
            moves = game.board.empty_cells()
        if not moves:
            return NO_MOVE
        mv = int(self.rng.choice(moves))
        logging.debug("computer %s picks %d from %s", self.symbol, mv, moves)
        return mv


Player = Union[HumanPlayer, ComputerPlayer]


def make_player(kind: str, symbol: str, number: int, console: Optional[Console] = None,
                seed: Optional[int] = None, strategy: str = "random") -> Player:
    if kind == "human":
        return HumanPlayer(symbol, number, console if console is not None else Console())
    if kind == "computer":
        return ComputerPlayer(symbol, number, np.random.default_rng(seed), strategy)
    raise ValueError(f"Unknown player kind: {kind!r}")
