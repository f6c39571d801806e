#!/usr/bin/env python3
"""
Weighted Syllable Counts
========================
Draws how many syllables a generated name has.

The two standing profiles are read once from app.yaml:

    NORMAL  counts 2, 3, 4, 5  weights 4, 10, 3, 1
    SHORT   counts 2, 3        weights 4, 1
"""

import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from namekit.settings import require_setting
from .entropy import resolve


@dataclass(frozen=True)
class WeightedCount:
    """Immutable discrete distribution over syllable counts."""
    counts: Tuple[int, ...]
    weights: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "counts", tuple(self.counts))
        object.__setattr__(self, "weights", tuple(self.weights))
        if not self.counts:
            raise ValueError("WeightedCount needs at least one count")
        if len(self.counts) != len(self.weights):
            raise ValueError(
                f"counts and weights differ in length ({len(self.counts)} vs {len(self.weights)})"
            )
        for count in self.counts:
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise ValueError(f"counts must be positive integers, got {count!r}")
        for weight in self.weights:
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise ValueError(f"weights must be non-negative integers, got {weight!r}")
        if not any(self.weights):
            raise ValueError("at least one weight must be positive")

    @classmethod
    def from_config(cls, cfg: Dict) -> 'WeightedCount':
        if not isinstance(cfg, dict) or 'counts' not in cfg or 'weights' not in cfg:
            raise ValueError("profile config needs 'counts' and 'weights'")
        return cls(cfg['counts'], cfg['weights'])

    def sample(self, rng: Optional[random.Random] = None) -> int:
        return resolve(rng).choices(self.counts, weights=self.weights, k=1)[0]

    def probability(self, count: int) -> float:
        total = sum(self.weights)
        return sum(w for c, w in zip(self.counts, self.weights) if c == count) / total

    def as_dict(self) -> Dict[int, int]:
        table: Dict[int, int] = {}
        for count, weight in zip(self.counts, self.weights):
            table[count] = table.get(count, 0) + weight
        return table


NORMAL = WeightedCount.from_config(require_setting("generation.profiles.normal"))
SHORT = WeightedCount.from_config(require_setting("generation.profiles.short"))

PROFILES = {
    'normal': NORMAL,
    'short': SHORT,
}


__all__ = ['WeightedCount', 'NORMAL', 'SHORT', 'PROFILES']
