import pytest

from treblecross.config import GameConfig
from treblecross.console import ScriptedConsole
from treblecross.game import Game, GameStatus, new_game
from treblecross.game_basics import Board
from treblecross.players import NO_MOVE, ComputerPlayer, HumanPlayer
from treblecross.savefile import load_text


class FirstChoice:
    def choice(self, seq):
        return seq[0]


class Scripted:
    """Player returning a fixed sequence of moves."""

    def __init__(self, symbol, number, moves):
        self.symbol = symbol
        self.number = number
        self._moves = list(moves)

    def get_move(self, game):
        return self._moves.pop(0)


def _pvp(size, lines):
    con = ScriptedConsole(lines)
    return Game(Board(size), (HumanPlayer('X', 1, con), HumanPlayer('O', 2, con)), console=con), con


def test_player_one_wins_with_consecutive_line():
    game, con = _pvp(5, ["0", "3", "1", "4", "2"])
    assert game.play() is GameStatus.WON
    assert game.winner is game.players[0]
    assert "Player 1 wins!" in con.output
    assert con.output[-1] == "Move History:\n0 3 1 4 2"


def test_player_two_wins_across_edge():
    game, con = _pvp(7, ["2", "6", "4", "0", "3", "1"])
    # X3 completes 2,3,4 before O gets to 1
    assert game.play() is GameStatus.WON
    assert game.winner.symbol == 'X'

    game, con = _pvp(7, ["2", "6", "4", "0", "5", "1"])
    assert game.play() is GameStatus.WON
    assert game.winner is game.players[1]
    assert "Player 2 wins!" in con.output


def test_draw_on_full_board():
    game, con = _pvp(4, ["0", "1", "2", "3"])
    assert game.play() is GameStatus.DRAW
    assert game.winner is None
    assert "It's a tie!" in con.output


def test_turns_alternate():
    game, _ = _pvp(6, [])
    assert game.to_move() is game.players[0]
    game.apply_move(0)
    assert game.to_move() is game.players[1]
    game.apply_move(3)
    assert game.to_move() is game.players[0]
    assert [r.symbol for r in game.history.records()] == ['X', 'O']


def test_no_move_sentinel_keeps_same_player():
    p1 = Scripted('X', 1, [NO_MOVE, 7, 1])
    p2 = Scripted('O', 2, [4])
    game = Game(Board(6), (p1, p2), console=ScriptedConsole())
    assert game.step() is GameStatus.AWAITING_MOVE
    assert game.history.moves() == []
    # out of range from a strategy is treated like no move
    assert game.step() is GameStatus.AWAITING_MOVE
    assert game.step() is GameStatus.AWAITING_MOVE
    assert game.history.moves() == [1]
    assert game.to_move() is p2


def test_apply_move_validation():
    game, _ = _pvp(3, [])
    with pytest.raises(ValueError):
        game.apply_move(5)
    game.apply_move(0)
    with pytest.raises(ValueError):
        game.apply_move(0)


def test_no_moves_after_game_over():
    game, _ = _pvp(3, [])
    game.apply_move(0)
    game.apply_move(1)
    game.apply_move(2)
    assert game.status is GameStatus.DRAW
    with pytest.raises(RuntimeError):
        game.apply_move(0)
    assert game.step() is GameStatus.DRAW


def test_refresh_after_load_of_finished_game():
    game, _ = _pvp(5, [])
    load_text("XXXO \n0 3 1 2\n", game.board, game.history)
    assert game.refresh_status() is GameStatus.WON
    assert game.winner is game.players[0]


def test_turn_follows_loaded_log():
    game, _ = _pvp(5, [])
    load_text("XX O \n0 1 3\n", game.board, game.history)
    assert game.to_move() is game.players[0]
    load_text("X    \n0\n", game.board, game.history)
    assert game.to_move() is game.players[1]


def test_human_vs_computer_scripted():
    con = ScriptedConsole(["2", "3", "4"])
    game = Game(Board(5), (HumanPlayer('X', 1, con), ComputerPlayer('O', 2, FirstChoice())), console=con)
    # X2, O0, X3, O1, X4 -> X wins with 2,3,4
    assert game.play() is GameStatus.WON
    assert game.history.moves() == [2, 0, 3, 1, 4]
    assert "Player 1 wins!" in con.output


def test_computer_vs_computer_terminates():
    import numpy as np

    for seed in range(10):
        players = (ComputerPlayer('X', 1, np.random.default_rng(seed)),
                   ComputerPlayer('O', 2, np.random.default_rng(seed + 100)))
        game = Game(Board(8), players, console=ScriptedConsole())
        assert game.play().is_terminal


def test_game_requires_distinct_symbols():
    con = ScriptedConsole()
    with pytest.raises(ValueError):
        Game(Board(3), (HumanPlayer('X', 1, con), HumanPlayer('X', 2, con)))


def test_new_game_from_config():
    con = ScriptedConsole()
    g = new_game(GameConfig(size=6, mode=2, ai="tactical", seed=1), console=con)
    assert len(g.board) == 6
    assert isinstance(g.players[0], HumanPlayer)
    assert isinstance(g.players[1], ComputerPlayer)
    assert g.players[1].strategy == "tactical"
    with pytest.raises(ValueError):
        new_game(GameConfig(size=None, mode=1), console=con)
