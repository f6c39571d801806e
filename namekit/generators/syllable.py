#!/usr/bin/env python3
"""
Syllable
========
One phonetic fragment of a language word-list plus its classification and
adjacency rules.

Line grammar (flags are case-insensitive):

    [-+]? LETTERS ( WHITESPACE [-+][vc] ){0,2}

    -el          prefix "el"
    +ion         suffix "ion"
    dor -v +c    center "dor": must follow a vowel, must precede a consonant

A leading "-" marks a prefix and "+" a suffix; unmarked lines are centers.
"-v"/"-c" constrain what may precede the syllable, "+v"/"+c" what may follow
it. Whether each edge is itself a vowel is derived from the first and last
letter of the value.

LETTERS are Unicode letters of any script; combining marks may follow a
letter. Digits, numerals such as "²" or "Ⅻ", and punctuation are rejected.
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from namekit.errors import ParseError
from .joiner import Joiner

logger = logging.getLogger(__name__)


class Classification(Enum):
    """Position a syllable may take in a name."""
    PREFIX = "prefix"
    CENTER = "center"
    SUFFIX = "suffix"

    @property
    def marker(self) -> str:
        return _MARKERS[self]

    @classmethod
    def from_marker(cls, marker: Optional[str]) -> 'Classification':
        if not marker:
            return cls.CENTER
        for classification, symbol in _MARKERS.items():
            if symbol == marker:
                return classification
        raise ValueError(f"unknown classification marker: {marker!r}")


_MARKERS = {
    Classification.PREFIX: "-",
    Classification.CENTER: "",
    Classification.SUFFIX: "+",
}

_LINE_RE = re.compile(r'^([-+])?(\S+)((?:\s+\S+)*)$')
_DIRECTIVE_RE = re.compile(r'^([-+])([vc])$', re.IGNORECASE)
MAX_DIRECTIVES = 2


def is_letters(value: str) -> bool:
    """Letters, each optionally followed by combining marks (e.g. Devanagari vowel signs)."""
    if not value or not unicodedata.category(value[0]).startswith('L'):
        return False
    return all(unicodedata.category(ch)[0] in ('L', 'M') for ch in value)


@dataclass(frozen=True)
class Syllable:
    """A parsed syllable; immutable and compared by value."""
    value: str
    classification: Classification = Classification.CENTER
    previous_joiner: Joiner = Joiner.SOME
    next_joiner: Joiner = Joiner.SOME

    @classmethod
    def parse(cls, raw: str) -> 'Syllable':
        """
        Parse one word-list line.

        Raises
        ------
        ParseError
            The line is empty, holds non-letters in its value, carries a
            malformed directive, more than two directives, or two directives
            for the same edge.
        """
        line = unicodedata.normalize('NFC', raw).strip() if raw is not None else ''
        if not line:
            raise ParseError(raw, "empty line")

        match = _LINE_RE.match(line)
        if match is None:
            raise ParseError(raw, "value must be letters, optionally marked with '-' or '+'")

        marker, value, tail = match.groups()
        if not is_letters(value):
            raise ParseError(raw, "value must be letters, optionally marked with '-' or '+'")
        tokens = tail.split()
        if len(tokens) > MAX_DIRECTIVES:
            raise ParseError(raw, f"at most {MAX_DIRECTIVES} directives allowed, got {len(tokens)}")

        previous_rule = None
        next_rule = None
        for token in tokens:
            directive = _DIRECTIVE_RE.match(token)
            if directive is None:
                raise ParseError(raw, f"malformed directive {token!r}")
            side, rule = directive.group(1), directive.group(2).lower()
            if side == '-':
                if previous_rule is not None:
                    raise ParseError(raw, "duplicate previous-edge directive")
                previous_rule = rule
            else:
                if next_rule is not None:
                    raise ParseError(raw, "duplicate next-edge directive")
                next_rule = rule

        syllable = cls(
            value=value,
            classification=Classification.from_marker(marker),
            previous_joiner=Joiner.for_edge(value[0], previous_rule),
            next_joiner=Joiner.for_edge(value[-1], next_rule),
        )
        logger.debug("parsed %r as %r", raw, syllable)
        return syllable

    @classmethod
    def of(cls,
           value: str,
           classification: Classification = Classification.CENTER,
           previous: Optional[str] = None,
           following: Optional[str] = None) -> 'Syllable':
        """Build a syllable from parts; ``previous``/``following`` are 'v', 'c' or None."""
        line = classification.marker + value
        if previous:
            line += f" -{previous}"
        if following:
            line += f" +{following}"
        return cls.parse(line)

    def connects(self, other: 'Syllable') -> bool:
        """True when ``other`` may directly follow this syllable."""
        return self.next_joiner.joins(other.previous_joiner)

    def to_string(self) -> str:
        return (self.classification.marker
                + self.value
                + self.previous_joiner.value_previous()
                + self.next_joiner.value_next())

    @property
    def is_prefix(self) -> bool:
        return self.classification is Classification.PREFIX

    @property
    def is_suffix(self) -> bool:
        return self.classification is Classification.SUFFIX

    def __str__(self) -> str:
        return self.to_string()


__all__ = ['Syllable', 'Classification', 'ParseError', 'is_letters']
