#!/usr/bin/env python3
"""
Random Source
=============
Per-thread pseudo-random generators for name generation.

Every operation that draws randomness accepts an optional ``rng``; when it is
omitted the calling thread's generator from get_rng() is used, so loaded
languages can be shared between threads without locking.

Usage:
    from namekit.generators.entropy import get_rng, seeded

    rng = seeded(42)          # deterministic, e.g. for tests or --seed
    name = generator.generate_name(rng=rng)
"""

import random
import threading
from typing import Optional

_local = threading.local()


def get_rng() -> random.Random:
    """Return the calling thread's generator, creating it on first use."""
    rng = getattr(_local, 'rng', None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def seed_thread(seed: Optional[int]) -> random.Random:
    """Replace the calling thread's generator with one seeded by ``seed``."""
    _local.rng = random.Random(seed)
    return _local.rng


def seeded(seed: Optional[int]) -> random.Random:
    """Return an independent generator; ``None`` seeds from system entropy."""
    return random.Random(seed)


def resolve(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else get_rng()


__all__ = ['get_rng', 'seed_thread', 'seeded', 'resolve']
