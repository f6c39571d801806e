"""
Tests for Random Source
=======================
Per-thread generators in namekit/generators/entropy.py.
"""

import random
import sys
import threading
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators.entropy import get_rng, resolve, seed_thread, seeded


class TestEntropy:

    def test_thread_generator_is_stable(self):
        assert get_rng() is get_rng()
        assert isinstance(get_rng(), random.Random)

    def test_threads_get_own_generator(self):
        seen = []
        thread = threading.Thread(target=lambda: seen.append(get_rng()))
        thread.start()
        thread.join()
        assert seen[0] is not get_rng()

    def test_seeded_is_deterministic(self):
        assert seeded(3).random() == seeded(3).random()
        assert seeded(3) is not seeded(3)

    def test_seed_thread(self):
        seed_thread(10)
        first = [get_rng().random() for _ in range(3)]
        seed_thread(10)
        assert [get_rng().random() for _ in range(3)] == first

    def test_resolve(self):
        rng = seeded(1)
        assert resolve(rng) is rng
        assert resolve(None) is get_rng()
