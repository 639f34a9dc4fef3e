#!/usr/bin/env python3
"""
Computer-vs-computer self-play over many seeds.

Reports how often player 1 (X), player 2 (O) win or draw, with 95% CIs,
for each pairing of computer strategies.
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import statistics as stats
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from treblecross.console import ScriptedConsole
from treblecross.game import Game, GameStatus
from treblecross.game_basics import Board
from treblecross.players import ComputerPlayer


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    size: int = 9
    games: int = 200
    seed: int = 42
    strategies: Tuple[str, str] = ("random", "random")


def play_one(size: int, seed: int, strategies: Tuple[str, str]) -> Tuple[GameStatus, int, int]:
    """Return (status, winner number or 0, plies)."""
    ss = np.random.SeedSequence(seed)
    r1, r2 = (np.random.default_rng(s) for s in ss.spawn(2))
    players = (
        ComputerPlayer('X', 1, r1, strategies[0]),
        ComputerPlayer('O', 2, r2, strategies[1]),
    )
    game = Game(Board(size), players, console=ScriptedConsole())
    status = game.play()
    winner = game.winner.number if game.winner is not None else 0
    return status, winner, len(game.history)


def simulate(cfg: Config) -> Dict[str, object]:
    x_wins: List[float] = []
    o_wins: List[float] = []
    draws: List[float] = []
    plies: List[float] = []
    for g in range(cfg.games):
        status, winner, n = play_one(cfg.size, cfg.seed + g, cfg.strategies)
        x_wins.append(1.0 if winner == 1 else 0.0)
        o_wins.append(1.0 if winner == 2 else 0.0)
        draws.append(1.0 if status is GameStatus.DRAW else 0.0)
        plies.append(float(n))
    summary: Dict[str, object] = {
        "size": cfg.size,
        "games": cfg.games,
        "strategies": list(cfg.strategies),
    }
    for name, vals in (("x_win", x_wins), ("o_win", o_wins), ("draw", draws), ("plies", plies)):
        m, h = ci95(vals)
        summary[f"{name}_mean"] = round(m, 4)
        summary[f"{name}_ci95_half"] = round(h, 4)
    return summary


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Self-play simulation for treblecross computer players")
    ap.add_argument("--size", type=int, default=9)
    ap.add_argument("--games", type=int, default=200)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--x", choices=["random", "tactical"], default="random", help="Strategy for X")
    ap.add_argument("--o", choices=["random", "tactical"], default="random", help="Strategy for O")
    ap.add_argument("--all-pairs", action="store_true", help="Run every pairing of strategies")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    if args.size < 1 or args.games < 1:
        logging.error("size and games must be positive")
        return 2
    if args.all_pairs:
        pairs = [(a, b) for a in ("random", "tactical") for b in ("random", "tactical")]
    else:
        pairs = [(args.x, args.o)]
    for pair in pairs:
        cfg = Config(size=args.size, games=args.games, seed=args.seed, strategies=pair)
        logging.info("Simulating %d games of %s vs %s on %d cells…", cfg.games, pair[0], pair[1], cfg.size)
        print(json.dumps(simulate(cfg)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
