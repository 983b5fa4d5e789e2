"""Timestamped progress logging and search counters shared by the solver, CLI and API."""

from __future__ import annotations

import sys
import time
from dataclasses import asdict, dataclass


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    # stderr keeps stdout free for grids and JSON payloads
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


@dataclass
class SearchStats:
    fills: int = 0
    backtracks: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    duration_ms: int = 0

    def as_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"{self.fills} fills, {self.backtracks} backtracks, "
            f"{self.dead_ends} dead ends, depth {self.max_depth}, "
            f"{self.duration_ms} ms"
        )
