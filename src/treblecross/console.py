"""
Terminal I/O collaborator: line-based prompts in, display text out.

Game code talks to a Console instead of calling input()/print() directly so
the same loop can be driven by a person or by canned lines.
"""
from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, List, Optional

from .game_basics import parse_index


class Console:
    def read_line(self, prompt: Optional[str] = None) -> str:
        if prompt:
            self.write(prompt)
        return input()

    def write(self, text: str = "") -> None:
        print(text)

    def clear(self) -> None:
        if sys.stdout.isatty():
            print("\033[2J\033[H", end="")

    def prompt_int(self, prompt: str, minimum: Optional[int] = None,
                   choices: Optional[Iterable[int]] = None) -> int:
        allowed = set(choices) if choices is not None else None
        while True:
            raw = self.read_line(prompt).strip()
            value = parse_index(raw)
            if value is None:
                self.write(f"Please enter a whole number, got {raw!r}.")
                continue
            if minimum is not None and value < minimum:
                self.write(f"Please enter a number >= {minimum}.")
                continue
            if allowed is not None and value not in allowed:
                self.write(f"Please choose one of {sorted(allowed)}.")
                continue
            return value


class ScriptedConsole(Console):
    """Feeds pre-recorded lines and keeps everything written."""

    def __init__(self, lines: Iterable[str] = ()):
        self._lines = deque(lines)
        self.output: List[str] = []

    def read_line(self, prompt: Optional[str] = None) -> str:
        if prompt:
            self.write(prompt)
        if not self._lines:
            raise EOFError("scripted input exhausted")
        return self._lines.popleft()

    def write(self, text: str = "") -> None:
        self.output.append(text)

    def clear(self) -> None:
        pass

    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
