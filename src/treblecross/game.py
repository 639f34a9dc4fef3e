"""
Turn loop for a two-player game on a shared board.

States: AWAITING_MOVE -> (place + evaluate) -> AWAITING_MOVE | WON | DRAW.
The player due to move is derived from the move log, so undo, redo and load
hand the turn to whoever actually moves next.
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from .console import Console
from .config import GameConfig
from .game_basics import SYMBOLS, Board, render_board
from .history import MoveHistory
from .players import NO_MOVE, Player, make_player


class GameStatus(Enum):
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.AWAITING_MOVE


class Game:
    def __init__(self, board: Board, players: Sequence[Player],
                 history: Optional[MoveHistory] = None,
                 console: Optional[Console] = None,
                 save_dir: Optional[Path] = None):
        if len(players) != 2 or players[0].symbol == players[1].symbol:
            raise ValueError("A game needs two players with distinct symbols")
        self.board = board
        self.players = tuple(players)
        self.history = history if history is not None else MoveHistory()
        self.console = console if console is not None else Console()
        self.save_dir = save_dir
        self.status = GameStatus.AWAITING_MOVE
        self.winner: Optional[Player] = None
        self.refresh_status()

    def to_move(self) -> Player:
        last = self.history.last_symbol()
        if last is None:
            return self.players[0]
        return self.players[1] if last == self.players[0].symbol else self.players[0]

    def refresh_status(self) -> GameStatus:
        for p in self.players:
            if self.board.has_winning_line(p.symbol):
                self.status = GameStatus.WON
                self.winner = p
                return self.status
        self.winner = None
        self.status = GameStatus.DRAW if self.board.is_full() else GameStatus.AWAITING_MOVE
        return self.status

    def apply_move(self, position: int) -> GameStatus:
        """Place the due player's symbol at `position` and evaluate the board."""
        if self.status.is_terminal:
            raise RuntimeError(f"Game is already over ({self.status.value})")
        if not self.board.is_valid_move(position):
            raise ValueError(f"Invalid move: {position!r}")
        mover = self.to_move()
        self.board.place_move(position, mover.symbol)
        self.history.record_move(position, mover.symbol)
        logging.debug("player %d (%s) -> %d", mover.number, mover.symbol, position)
        if self.board.has_winning_line(mover.symbol):
            self.status = GameStatus.WON
            self.winner = mover
        elif self.board.is_full():
            self.status = GameStatus.DRAW
        return self.status

    def step(self) -> GameStatus:
        if self.status.is_terminal:
            return self.status
        player = self.to_move()
        move = player.get_move(self)
        if move == NO_MOVE or not self.board.is_valid_move(move):
            # menu action or no legal move: state may have changed, ask again
            return self.refresh_status()
        return self.apply_move(move)

    def display(self) -> None:
        self.console.write(render_board(self.board))
        self.console.write(self.history.format_history())

    def announce_result(self) -> None:
        if self.status is GameStatus.WON and self.winner is not None:
            self.console.write(f"Player {self.winner.number} wins!")
        elif self.status is GameStatus.DRAW:
            self.console.write("It's a tie!")

    def play(self) -> GameStatus:
        while not self.status.is_terminal:
            self.console.clear()
            self.display()
            self.step()
        self.console.clear()
        self.console.write(render_board(self.board))
        self.announce_result()
        self.console.write(self.history.format_history())
        logging.info("game over: %s after %d moves", self.status.value, len(self.history))
        return self.status


def new_game(cfg: GameConfig, console: Optional[Console] = None) -> Game:
    """Build a game from a complete config (size and mode set)."""
    if cfg.size is None or cfg.mode is None:
        raise ValueError("Board size and mode must be set")
    cfg.validate()
    console = console if console is not None else Console()
    p1 = make_player("human", SYMBOLS[0], 1, console=console)
    if cfg.vs_computer:
        p2 = make_player("computer", SYMBOLS[1], 2, seed=cfg.seed, strategy=cfg.ai)
    else:
        p2 = make_player("human", SYMBOLS[1], 2, console=console)
    return Game(Board(cfg.size), (p1, p2), console=console, save_dir=cfg.save_dir)
