#!/usr/bin/env python3
"""
Name Generators
===============
Syllable-chain name generation:
- Joiner: bitflag adjacency rules for one syllable edge
- Syllable / SyllableCollection: parsed word-list entries
- WeightedCount: how many syllables a name has
- NameGenerator: a language bundle and the chain assembly
- languages: bundled word-lists and file loaders
"""

from .joiner import Joiner, is_vowel
from .syllable import Syllable, Classification
from .syllables import SyllableCollection
from .weighted import WeightedCount, NORMAL, SHORT, PROFILES
from .name_generator import NameGenerator, MIN_SYLLABLES
from .entropy import get_rng, seeded, seed_thread
from .languages import (
    Language,
    asset_bytes,
    read_language,
    read_file,
    load_language,
    load_file,
)

__all__ = [
    # Rules
    'Joiner',
    'is_vowel',
    # Syllables
    'Syllable',
    'Classification',
    'SyllableCollection',
    # Counts
    'WeightedCount',
    'NORMAL',
    'SHORT',
    'PROFILES',
    # Generator
    'NameGenerator',
    'MIN_SYLLABLES',
    # Randomness
    'get_rng',
    'seeded',
    'seed_thread',
    # Languages
    'Language',
    'asset_bytes',
    'read_language',
    'read_file',
    'load_language',
    'load_file',
]
