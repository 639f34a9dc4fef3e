"""Centralized path helpers for save files.

Environment-first, falling back to the current working directory so saves
land next to where the game was started.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

SAVE_DIR_ENV = "TREBLECROSS_SAVE_DIR"


def save_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """Directory that relative save names resolve under.

    Order: explicit override -> env var TREBLECROSS_SAVE_DIR -> CWD.
    """
    if override:
        return Path(override).expanduser()
    env = os.getenv(SAVE_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def ensure_save_dir(override: Optional[Union[str, Path]] = None) -> Path:
    d = save_dir(override)
    d.mkdir(parents=True, exist_ok=True)
    return d


def resolve_save_path(name: Union[str, Path], override: Optional[Union[str, Path]] = None) -> Path:
    p = Path(name).expanduser()
    if p.is_absolute():
        return p
    return save_dir(override) / p
