from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from . import config as cfgmod
from .console import Console
from .errors import SaveError
from .game import new_game
from .game_basics import EMPTY, SYMBOLS, Board, other_symbol, render_board
from .history import MoveHistory
from .paths import ensure_save_dir, resolve_save_path
from .savefile import load_game, load_text, parse_game, read_save
from .tactics import format_hints


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="treblecross", description="Treblecross on a 1-D board")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer player")

    p_play = sub.add_parser("play", help="Play a game in the terminal (default)")
    _add_play_args(p_play)

    p_show = sub.add_parser("show", help="Print the board and move history of a save file")
    p_show.add_argument("file", type=Path, help="Save file to read")

    p_hint = sub.add_parser("hints", help="List tactical hints for a board")
    p_hint.add_argument(
        "--board", required=True, help="Board string of X, O and '.' or ' ' for empty, e.g. 'X.X..'"
    )
    p_hint.add_argument("--symbol", choices=list(SYMBOLS), default="X", help="Side to move")

    return p


def _add_play_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=int, default=None, help="Number of cells (prompted if omitted)")
    p.add_argument(
        "--mode",
        type=int,
        choices=[cfgmod.MODE_PVP, cfgmod.MODE_PVC],
        default=None,
        help="1 = player vs player, 2 = player vs computer (prompted if omitted)",
    )
    p.add_argument("--ai", choices=list(cfgmod.AI_KINDS), default=None, help="Computer strategy")
    p.add_argument("--save-dir", type=Path, default=None, help="Directory for save files")
    p.add_argument("--load", type=Path, default=None, help="Start from a saved game")


def _prompt_missing(cfg: cfgmod.GameConfig, console: Console) -> cfgmod.GameConfig:
    if cfg.size is None:
        size = console.prompt_int("Enter the number of cells in a row:", minimum=1)
        cfg = cfgmod.merge(cfg, size=size)
    if cfg.mode is None:
        console.write("Choose mode:")
        console.write("1. Player vs Player")
        console.write("2. Player vs Computer")
        mode = console.prompt_int("", choices=(cfgmod.MODE_PVP, cfgmod.MODE_PVC))
        cfg = cfgmod.merge(cfg, mode=mode)
    return cfg


def run_play(ns: argparse.Namespace, console: Optional[Console] = None) -> int:
    console = console if console is not None else Console()
    cfg = cfgmod.from_env()
    cfg = cfgmod.merge(
        cfg,
        size=getattr(ns, "size", None),
        mode=getattr(ns, "mode", None),
        ai=getattr(ns, "ai", None),
        seed=getattr(ns, "seed", None),
        save_dir=getattr(ns, "save_dir", None),
    )
    try:
        cfg.validate()
    except ValueError as exc:
        logging.error("%s", exc)
        return 2
    if cfg.save_dir is not None:
        ensure_save_dir(cfg.save_dir)

    console.write("Welcome to Treblecross (Tic-Tac-Toe)!")
    load_path = getattr(ns, "load", None)
    if load_path is not None and cfg.size is None:
        # board size comes from the save file
        try:
            saved = parse_game(read_save(resolve_save_path(load_path, cfg.save_dir)))
        except SaveError as exc:
            logging.error("%s", exc)
            return 2
        cfg = cfgmod.merge(cfg, size=saved.size)
    cfg = _prompt_missing(cfg, console)
    game = new_game(cfg, console=console)
    if load_path is not None:
        try:
            load_game(resolve_save_path(load_path, cfg.save_dir), game.board, game.history)
        except SaveError as exc:
            logging.error("%s", exc)
            return 2
        game.refresh_status()
    logging.debug("config=%s", cfg)
    game.play()
    return 0


def run_show(path: Path, console: Console) -> int:
    history = MoveHistory()
    try:
        text = read_save(path)
        board = Board(parse_game(text).size)
        load_text(text, board, history)
    except SaveError as exc:
        logging.error("%s", exc)
        return 2
    console.write(render_board(board, ruler=True))
    console.write(history.format_history())
    winner = board.winner()
    if winner is not None:
        console.write(f"status=won winner={winner}")
    elif board.is_full():
        console.write("status=draw")
    else:
        last = history.last_symbol()
        to_move = SYMBOLS[0] if last is None else other_symbol(last)
        console.write(f"status=in_progress to_move={to_move}")
    return 0


def run_hints(raw: str, symbol: str, console: Console) -> int:
    raw = raw.replace(".", EMPTY)
    try:
        board = Board.from_string(raw)
    except ValueError as exc:
        logging.error("Invalid board string: %s", exc)
        return 2
    console.write(format_hints(board, symbol))
    return 0


def main(argv: list[str] | None = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("treblecross"))
        except Exception:
            print("unknown")
        return 0

    console = console if console is not None else Console()
    if ns.cmd == "show":
        return run_show(ns.file, console)
    if ns.cmd == "hints":
        return run_hints(ns.board, ns.symbol, console)

    try:
        return run_play(ns, console)
    except EOFError:
        logging.info("Input closed; leaving the game.")
        return 0
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
