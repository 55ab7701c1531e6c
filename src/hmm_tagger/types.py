from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Cell:
    word: str
    tag: str
    prob: float
    # arena index of the best previous cell, None at the first position
    backpointer: Optional[int] = None


@dataclass(frozen=True)
class TaggedWord:
    word: str
    tag: str
