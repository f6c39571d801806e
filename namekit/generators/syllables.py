#!/usr/bin/env python3
"""
Syllable Collections
====================
Ordered, non-deduplicated sequences of Syllable with Joiner filtering, so a
language can find which syllables may follow the current end of a name.

Duplicate entries are kept: a syllable listed twice is picked twice as often.
"""

import random
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional

from .entropy import resolve
from .joiner import Joiner
from .syllable import Classification, Syllable


class SyllableCollection:
    """Ordered collection of syllables."""

    def __init__(self, syllables: Iterable[Syllable] = None):
        self._syllables: List[Syllable] = list(syllables) if syllables is not None else []

    @classmethod
    def from_strings(cls, *raw: str) -> 'SyllableCollection':
        """Parse each string into a Syllable; raises ParseError on the first bad one."""
        return cls(Syllable.parse(s) for s in raw)

    def add(self, syllable: Syllable) -> None:
        self._syllables.append(syllable)

    def all(self) -> List[Syllable]:
        return list(self._syllables)

    def contains(self, syllable: Syllable) -> bool:
        return syllable in self._syllables

    def filter_by_previous(self, joiner: Joiner) -> 'SyllableCollection':
        """Syllables that may follow an edge whose next-joiner is ``joiner``."""
        return SyllableCollection(s for s in self._syllables if joiner.joins(s.previous_joiner))

    def pick_random(self, rng: Optional[random.Random] = None) -> Optional[Syllable]:
        """Uniform pick over every entry; None when empty."""
        if not self._syllables:
            return None
        return self._syllables[resolve(rng).randrange(len(self._syllables))]

    def next_from(self, syllable: Syllable, rng: Optional[random.Random] = None) -> Optional[Syllable]:
        """A random entry that may follow ``syllable``, or None."""
        return self.filter_by_previous(syllable.next_joiner).pick_random(rng)

    def collapse_to_string(self) -> str:
        return ''.join(s.value for s in self._syllables)

    def first(self) -> Optional[Syllable]:
        return self._syllables[0] if self._syllables else None

    def last(self) -> Optional[Syllable]:
        return self._syllables[-1] if self._syllables else None

    def get(self, index: int) -> Optional[Syllable]:
        if 0 <= index < len(self._syllables):
            return self._syllables[index]
        return None

    def is_empty(self) -> bool:
        return not self._syllables

    def classification_counts(self) -> Dict[Classification, int]:
        counts = Counter(s.classification for s in self._syllables)
        return {c: counts.get(c, 0) for c in Classification}

    def __len__(self) -> int:
        return len(self._syllables)

    def __iter__(self) -> Iterator[Syllable]:
        return iter(self._syllables)

    def __getitem__(self, index: int) -> Syllable:
        return self._syllables[index]

    def __contains__(self, syllable: object) -> bool:
        return syllable in self._syllables

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyllableCollection):
            return NotImplemented
        return self._syllables == other._syllables

    def __add__(self, other: 'SyllableCollection') -> 'SyllableCollection':
        return SyllableCollection(self._syllables + list(other))

    def __repr__(self) -> str:
        return f"SyllableCollection({[s.to_string() for s in self._syllables]!r})"


__all__ = ['SyllableCollection']
