"""Typed result models for fuzzyscore."""

from dataclasses import dataclass
from typing import Any, Hashable, NamedTuple, Optional


class MatchingBlock(NamedTuple):
    """A maximal run where ``a[a:a+size] == b[b:b+size]``."""

    a: int       # start index in the first sequence
    b: int       # start index in the second sequence
    size: int


@dataclass(frozen=True)
class Candidate:
    """One scored choice from a single extraction call."""

    choice: Any
    processed: str           # normalised comparison text
    score: int               # 0-100
    key: Optional[Hashable] = None
    keyed: bool = False      # True when the choice came from a mapping

    def as_tuple(self) -> tuple:
        """``(choice, score)``, or ``(choice, score, key)`` for mappings."""
        if self.keyed:
            return (self.choice, self.score, self.key)
        return (self.choice, self.score)
