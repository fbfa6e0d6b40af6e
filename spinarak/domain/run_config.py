from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    """Inputs for one run: the word to search for, the pool size and the links."""

    word: str
    num_workers: int
    links: tuple[str, ...]
