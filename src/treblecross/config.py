"""
Game configuration: environment first, command line on top, defaults last.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

MODE_PVP = 1
MODE_PVC = 2
AI_KINDS = ("random", "tactical")

SEED_ENV = "TREBLECROSS_SEED"
AI_ENV = "TREBLECROSS_AI"


@dataclass
class GameConfig:
    size: Optional[int] = None  # prompted for when None
    mode: Optional[int] = None  # 1 = two humans, 2 = human vs computer
    ai: str = "random"
    seed: Optional[int] = None
    save_dir: Optional[Path] = None

    @property
    def vs_computer(self) -> bool:
        return self.mode == MODE_PVC

    def validate(self) -> None:
        if self.size is not None and self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if self.mode is not None and self.mode not in (MODE_PVP, MODE_PVC):
            raise ValueError(f"Mode must be {MODE_PVP} or {MODE_PVC}, got {self.mode}")
        if self.ai not in AI_KINDS:
            raise ValueError(f"AI must be one of {AI_KINDS}, got {self.ai!r}")


def from_env(base: Optional[GameConfig] = None) -> GameConfig:
    cfg = base if base is not None else GameConfig()
    seed = os.getenv(SEED_ENV)
    if seed:
        try:
            cfg = replace(cfg, seed=int(seed))
        except ValueError:
            logging.warning("Ignoring non-integer %s=%r", SEED_ENV, seed)
    ai = os.getenv(AI_ENV)
    if ai:
        cfg = replace(cfg, ai=ai.strip().lower())
    return cfg


def merge(cfg: GameConfig, **overrides) -> GameConfig:
    """Apply non-None overrides (typically parsed CLI flags)."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(cfg, **changes)
