#!/usr/bin/env python3
"""
Syllable Joiner
===============
Bitflag representation of the properties that allow one syllable edge to
join with another.

A Joiner has no notion of whether it describes what may come before or after
a syllable; the Syllable holding it decides that. Two Joiners join only when
each accepts the other:

    SOME                         1   edge exists
    SOME | VOWEL                 3   edge letter is a vowel
    SOME | ONLY_VOWEL            5   neighbour must be a vowel
    SOME | VOWEL | ONLY_VOWEL    7
    SOME | ONLY_CONSONANT        9   neighbour must be a consonant
    SOME | VOWEL | ONLY_CONSONANT 11
"""

import logging
import unicodedata
from enum import IntFlag
from typing import Optional

from namekit.settings import require_setting

logger = logging.getLogger(__name__)


VOWELS = frozenset(str(require_setting("phonetics.vowels")).lower())
if not VOWELS:
    raise ValueError("app.yaml 'phonetics.vowels' must not be empty")


def is_vowel(char: str) -> bool:
    """True when ``char`` is a vowel, ignoring case and diacritics."""
    if not char:
        return False
    base = unicodedata.normalize('NFD', char[0].lower())[0]
    return base in VOWELS


class Joiner(IntFlag):
    """Adjacency capability of one syllable edge."""
    NONE = 0
    SOME = 1
    VOWEL = 2
    ONLY_VOWEL = 4
    ONLY_CONSONANT = 8

    @classmethod
    def for_edge(cls, letter: str, directive: Optional[str] = None) -> 'Joiner':
        """
        Build the Joiner for a syllable edge.

        ``letter`` is the character sitting on that edge; ``directive`` is the
        rule letter from the source line ('v' or 'c'), if any.
        """
        joiner = cls.SOME
        if is_vowel(letter):
            joiner |= cls.VOWEL
        if directive is not None:
            directive = directive.lower()
            if directive == 'v':
                joiner |= cls.ONLY_VOWEL
            elif directive == 'c':
                joiner |= cls.ONLY_CONSONANT
            else:
                raise ValueError(f"unknown joiner directive: {directive!r}")
        return joiner

    def joins(self, other: 'Joiner') -> bool:
        """True when both edges accept each other."""
        can_to = self.joins_to(other)
        can_from = Joiner(other).joins_to(self)
        logger.debug("joins %s -> %s: to=%s from=%s", self.bits, Joiner(other).bits, can_to, can_from)
        return can_to and can_from

    def joins_to(self, other: 'Joiner') -> bool:
        """True when ``other`` accepts sitting next to this edge."""
        if not other:
            return False
        if not other & Joiner.SOME:
            return False
        if self & Joiner.VOWEL and other & Joiner.ONLY_CONSONANT:
            return False
        if not self & Joiner.VOWEL and other & Joiner.ONLY_VOWEL:
            return False
        return True

    def value_previous(self) -> str:
        """Render the previous-edge directive (" -c", " -v" or "")."""
        if self & Joiner.ONLY_CONSONANT:
            return " -c"
        if self & Joiner.ONLY_VOWEL:
            return " -v"
        return ""

    def value_next(self) -> str:
        """Render the next-edge directive (" +c", " +v" or "")."""
        if self & Joiner.ONLY_CONSONANT:
            return " +c"
        if self & Joiner.ONLY_VOWEL:
            return " +v"
        return ""

    @property
    def bits(self) -> str:
        return format(int(self), '04b')


__all__ = ['Joiner', 'is_vowel', 'VOWELS']
