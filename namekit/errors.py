#!/usr/bin/env python3
"""
Error Types
===========
Every failure raised by namekit derives from NameKitError.

    ParseError          - a raw line does not match the syllable grammar
    InvalidLanguage     - a loaded language is missing data or has bad lines
    ExhaustedCandidates - no syllable may follow the current chain
    SourceUnavailable   - a word-list cannot be found or read
"""

from typing import List, Optional


class NameKitError(Exception):
    """Base class for namekit errors."""


class ParseError(NameKitError, ValueError):
    """A raw syllable line does not match the grammar."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"cannot parse syllable {line!r}: {reason}")


class InvalidLanguage(NameKitError):
    """
    A language failed validation after loading.

    The partially built generator is kept on ``generator`` so callers can
    inspect ``generator.invalid_lines`` and the collection sizes.
    """

    def __init__(self, generator):
        self.generator = generator
        self.reasons = self.describe(generator)
        name = generator.name or '<unnamed>'
        super().__init__(f"invalid language {name}: {'; '.join(self.reasons)}")

    @staticmethod
    def describe(generator) -> List[str]:
        reasons = []
        if not generator.name:
            reasons.append("name is empty")
        for label in ('prefixes', 'centers', 'suffixes'):
            if len(getattr(generator, label)) == 0:
                reasons.append(f"no {label}")
        if generator.invalid_lines:
            reasons.append(f"{len(generator.invalid_lines)} invalid line(s)")
        return reasons


class ExhaustedCandidates(NameKitError):
    """
    A generation step found no syllable compatible with the frontier.

    Retrying with the same language and the same earlier picks fails the same
    way; the dataset is too sparse for that chain.
    """

    def __init__(self, language: str, stage, frontier=None, partial: str = ''):
        self.language = language
        self.stage = stage
        self.frontier = frontier
        self.partial = partial
        stage_name = getattr(stage, 'value', stage)
        message = f"{language}: no {stage_name} candidate"
        if frontier is not None:
            message += f" joins {frontier!r}"
        if partial:
            message += f" after {partial!r}"
        super().__init__(message)


class SourceUnavailable(NameKitError):
    """A language source could not be located or read."""

    def __init__(self, source, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        message = f"language source unavailable: {source}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


__all__ = [
    'NameKitError',
    'ParseError',
    'InvalidLanguage',
    'ExhaustedCandidates',
    'SourceUnavailable',
]
