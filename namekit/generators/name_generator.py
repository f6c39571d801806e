#!/usr/bin/env python3
"""
Name Generator
==============
A language bundle (prefixes, centers, suffixes) and the chain assembly that
turns it into names.

Assembly for one name:

    Start -> PickPrefix -> PickCenter x (n - 2) -> PickSuffix -> Done

Every pick after the prefix is drawn from the syllables whose previous edge
joins the frontier (the next edge of the last syllable appended). An empty
pool aborts the name with ExhaustedCandidates; names are never truncated.

Usage:
    gen = NameGenerator.load("Min", ["-a", "b", "+c"])
    gen.generate_name()            # e.g. "Abbc"
    gen.generate_name(count=3)     # "Abc"
    gen.generate_short_name()
"""

import logging
import random
from typing import Iterable, List, Optional

from namekit.errors import ExhaustedCandidates, InvalidLanguage, ParseError
from namekit.settings import require_setting
from .entropy import resolve
from .syllable import Classification, Syllable
from .syllables import SyllableCollection
from .weighted import NORMAL, SHORT, WeightedCount

logger = logging.getLogger(__name__)


MIN_SYLLABLES = int(require_setting("generation.min_syllables"))
if MIN_SYLLABLES < 2:
    raise ValueError("generation.min_syllables must be at least 2 (prefix + suffix)")
MAX_ATTEMPTS = int(require_setting("generation.max_attempts"))


class NameGenerator:
    """
    Named set of prefix/center/suffix syllables.

    A generator may be partially invalid (see is_valid()); it is still
    constructed so the rejected lines stay inspectable. Generation never
    mutates the generator, so one instance can serve several threads.
    """

    def __init__(self,
                 name: str,
                 prefixes: SyllableCollection = None,
                 centers: SyllableCollection = None,
                 suffixes: SyllableCollection = None,
                 invalid_lines: List[str] = None,
                 rng: Optional[random.Random] = None):
        self.name = name
        self.prefixes = prefixes if prefixes is not None else SyllableCollection()
        self.centers = centers if centers is not None else SyllableCollection()
        self.suffixes = suffixes if suffixes is not None else SyllableCollection()
        self.invalid_lines = list(invalid_lines) if invalid_lines is not None else []
        self._rng = rng

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls,
             name: str,
             lines: Iterable[str],
             strict: bool = False,
             rng: Optional[random.Random] = None) -> 'NameGenerator':
        """
        Build a generator from word-list lines.

        Lines that fail to parse are kept in ``invalid_lines`` and loading
        continues. With ``strict`` an invalid result raises InvalidLanguage,
        which carries the generator.
        """
        generator = cls(name, rng=rng)
        groups = {
            Classification.PREFIX: generator.prefixes,
            Classification.CENTER: generator.centers,
            Classification.SUFFIX: generator.suffixes,
        }

        for line in lines:
            try:
                syllable = Syllable.parse(line)
            except ParseError as e:
                logger.warning("%s: %s", name, e)
                generator.invalid_lines.append(line)
                continue
            groups[syllable.classification].add(syllable)

        logger.debug(
            "loaded %s: %d prefixes, %d centers, %d suffixes, %d invalid",
            name, len(generator.prefixes), len(generator.centers),
            len(generator.suffixes), len(generator.invalid_lines),
        )
        if strict:
            generator.validate()
        return generator

    def is_valid(self) -> bool:
        return (bool(self.name)
                and len(self.prefixes) > 0
                and len(self.centers) > 0
                and len(self.suffixes) > 0
                and not self.invalid_lines)

    def validate(self) -> 'NameGenerator':
        """Return self, or raise InvalidLanguage when is_valid() is False."""
        if not self.is_valid():
            raise InvalidLanguage(self)
        return self

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def syllables(self) -> SyllableCollection:
        """All syllables: prefixes, then centers, then suffixes."""
        return self.prefixes + self.centers + self.suffixes

    def dump(self) -> List[str]:
        """Word-list lines rendered back from the parsed syllables."""
        return [s.to_string() for s in self.syllables()]

    def random_prefix(self, rng: Optional[random.Random] = None) -> Optional[Syllable]:
        return self.prefixes.pick_random(self._pick_rng(rng))

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _pick_rng(self, rng: Optional[random.Random]) -> random.Random:
        if rng is not None:
            return rng
        return resolve(self._rng)

    def generate_syllables(self,
                           profile: WeightedCount = NORMAL,
                           count: Optional[int] = None,
                           rng: Optional[random.Random] = None) -> SyllableCollection:
        """
        Assemble the syllable chain for one name.

        Parameters
        ----------
        profile : WeightedCount
            Distribution the syllable count is drawn from.
        count : int, optional
            Force the syllable count instead of sampling it.
        rng : random.Random, optional
            Random source; defaults to the generator's, then the thread's.

        Raises
        ------
        ExhaustedCandidates
            A prefix, center or suffix pool had no compatible syllable.
        """
        rng = self._pick_rng(rng)
        target = count if count is not None else profile.sample(rng)
        target = max(MIN_SYLLABLES, target)

        chain = SyllableCollection()
        prefix = self.prefixes.pick_random(rng)
        if prefix is None:
            self._abort(Classification.PREFIX, None, chain)
        chain.add(prefix)
        frontier = prefix.next_joiner

        while len(chain) < target - 1:
            center = self.centers.filter_by_previous(frontier).pick_random(rng)
            if center is None:
                self._abort(Classification.CENTER, frontier, chain)
            chain.add(center)
            frontier = center.next_joiner

        suffix = self.suffixes.filter_by_previous(frontier).pick_random(rng)
        if suffix is None:
            self._abort(Classification.SUFFIX, frontier, chain)
        chain.add(suffix)

        logger.debug("%s: assembled %s", self.name, ' + '.join(s.value for s in chain))
        return chain

    def _abort(self, stage: Classification, frontier, chain: SyllableCollection):
        partial = chain.collapse_to_string()
        logger.info("%s: no %s candidate after %r", self.name, stage.value, partial)
        raise ExhaustedCandidates(self.name, stage, frontier, partial)

    def generate_name(self,
                      profile: WeightedCount = NORMAL,
                      count: Optional[int] = None,
                      rng: Optional[random.Random] = None) -> str:
        """Generate one name with its first letter upper-cased."""
        name = self.generate_syllables(profile, count=count, rng=rng).collapse_to_string()
        return name[:1].upper() + name[1:]

    def generate_short_name(self, rng: Optional[random.Random] = None) -> str:
        return self.generate_name(SHORT, rng=rng)

    def generate_full_name(self, rng: Optional[random.Random] = None) -> str:
        """Given name and family name, e.g. "Aelor Thindel"."""
        rng = self._pick_rng(rng)
        return f"{self.generate_name(rng=rng)} {self.generate_name(rng=rng)}"

    def generate_names(self,
                       count: int,
                       profile: WeightedCount = NORMAL,
                       max_attempts: Optional[int] = None,
                       rng: Optional[random.Random] = None) -> List[str]:
        """
        Generate ``count`` names, starting a fresh chain when one exhausts.

        Each name gets up to ``max_attempts`` chains; the last
        ExhaustedCandidates is re-raised when all of them fail.
        """
        if max_attempts is None:
            max_attempts = MAX_ATTEMPTS
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        rng = self._pick_rng(rng)

        names = []
        for _ in range(count):
            for attempt in range(1, max_attempts + 1):
                try:
                    names.append(self.generate_name(profile, rng=rng))
                    break
                except ExhaustedCandidates:
                    if attempt == max_attempts:
                        raise
                    logger.debug("%s: retrying chain (attempt %d)", self.name, attempt + 1)
        return names

    def __repr__(self) -> str:
        return (f"NameGenerator(name={self.name!r}, prefixes={len(self.prefixes)}, "
                f"centers={len(self.centers)}, suffixes={len(self.suffixes)}, "
                f"invalid_lines={len(self.invalid_lines)})")


__all__ = ['NameGenerator', 'MIN_SYLLABLES']
