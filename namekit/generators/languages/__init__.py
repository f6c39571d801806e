#!/usr/bin/env python3
"""
Language Word-Lists
===================
Bundled syllable lists, one "<Language>.txt" file per language, plus loaders
for arbitrary word-list files.

Usage:
    from namekit.generators.languages import Language, load_language, load_file

    elven = load_language(Language.ELVEN)
    print(elven.generate_full_name())

    custom = load_file("my_language.txt")
    if not custom.is_valid():
        print(custom.invalid_lines)
"""

import random
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from namekit.errors import SourceUnavailable
from namekit.settings import get_setting, resolve_path
from ..entropy import resolve
from ..name_generator import NameGenerator

LANGUAGES_DIR = Path(__file__).parent


class Language(Enum):
    """Bundled languages; the value is the display name and file stem."""
    CURSE = "Curse"
    DEMONIC = "Demonic"
    ELVEN = "Elven"
    FANTASY = "Fantasy"
    GOBLIN = "Goblin"
    ROMAN = "Roman"

    @property
    def filename(self) -> str:
        return f"{self.value}.txt"

    @classmethod
    def parse(cls, text: str) -> 'Language':
        """Look a language up by display name or member name, ignoring case."""
        key = (text or '').strip().lower()
        for language in cls:
            if key in (language.value.lower(), language.name.lower()):
                return language
        available = ', '.join(l.value for l in cls)
        raise ValueError(f"Unknown language '{text}'. Available languages: {available}")

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> 'Language':
        return resolve(rng).choice(list(cls))

    def __str__(self) -> str:
        return self.value


def languages_dir(directory: Union[str, Path, None] = None) -> Path:
    """Directory the bundled word-lists are read from."""
    if directory is not None:
        return resolve_path(str(directory))
    configured = get_setting("languages.directory")
    return resolve_path(configured) if configured else LANGUAGES_DIR


# =============================================================================
# Asset lookup
# =============================================================================

@lru_cache(maxsize=32)
def _read_asset(path: Path) -> bytes:
    return path.read_bytes()


def asset_bytes(key: str, directory: Union[str, Path, None] = None) -> bytes:
    """Raw bytes of the word-list stored under ``key`` (e.g. "Elven.txt")."""
    path = languages_dir(directory) / key
    if not path.is_file():
        raise SourceUnavailable(key, f"no such asset in {path.parent}")
    try:
        return _read_asset(path)
    except OSError as e:
        raise SourceUnavailable(key, str(e)) from e


def _decode(source, data: bytes) -> List[str]:
    try:
        return data.decode('utf-8-sig').splitlines()
    except UnicodeDecodeError as e:
        raise SourceUnavailable(source, f"not UTF-8: {e}") from e


def read_language(language: Language, directory: Union[str, Path, None] = None) -> List[str]:
    return _decode(language.filename, asset_bytes(language.filename, directory))


def read_file(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e)) from e
    return _decode(path, data)


# =============================================================================
# Generators
# =============================================================================

def load_language(language: Union[Language, str],
                  strict: bool = True,
                  rng: Optional[random.Random] = None,
                  directory: Union[str, Path, None] = None) -> NameGenerator:
    """Load a bundled language; strict loads raise InvalidLanguage when invalid."""
    if isinstance(language, str):
        language = Language.parse(language)
    return NameGenerator.load(language.value, read_language(language, directory),
                              strict=strict, rng=rng)


def load_file(path: Union[str, Path],
              name: Optional[str] = None,
              strict: bool = False,
              rng: Optional[random.Random] = None) -> NameGenerator:
    """Load a word-list file; the language name defaults to the file stem."""
    path = Path(path)
    return NameGenerator.load(name or path.stem, read_file(path), strict=strict, rng=rng)


__all__ = [
    'Language',
    'LANGUAGES_DIR',
    'languages_dir',
    'asset_bytes',
    'read_language',
    'read_file',
    'load_language',
    'load_file',
]
