#!/usr/bin/env python3
"""
namekit - Syllable-Chain Name Generator
=======================================

Generates pronounceable names for fantasy languages by chaining prefix,
center and suffix syllables whose edges are allowed to touch.

Quick Start
-----------
    from namekit import Language, load_language

    elven = load_language(Language.ELVEN)
    elven.generate_name()          # e.g. "Aelirien"
    elven.generate_short_name()
    elven.generate_full_name()     # e.g. "Gilaren Thalwen"

    from namekit import NameGenerator
    custom = NameGenerator.load("Min", ["-a", "b", "+c"])
    custom.generate_name(count=3)  # "Abc"

Modules
-------
    namekit.generators - Joiner, Syllable, collections, counts, generator
    namekit.errors     - ParseError, InvalidLanguage, ExhaustedCandidates, ...
    namekit.settings   - app.yaml access
    namekit.config     - .env / environment overrides

CLI Usage
---------
    python -m namekit generate --elven -n 5
    python -m namekit dump --language goblin
    python -m namekit check --file my_language.txt
"""

__version__ = "0.1.0"
__author__ = "namekit"

from . import generators
from . import errors
from . import config

from .generators import (
    Joiner,
    Syllable,
    Classification,
    SyllableCollection,
    WeightedCount,
    NORMAL,
    SHORT,
    NameGenerator,
    Language,
    load_language,
    load_file,
)
from .errors import (
    NameKitError,
    ParseError,
    InvalidLanguage,
    ExhaustedCandidates,
    SourceUnavailable,
)
from .config import get_config, Config

__all__ = [
    '__version__',
    # Generators
    'Joiner',
    'Syllable',
    'Classification',
    'SyllableCollection',
    'WeightedCount',
    'NORMAL',
    'SHORT',
    'NameGenerator',
    'Language',
    'load_language',
    'load_file',
    # Errors
    'NameKitError',
    'ParseError',
    'InvalidLanguage',
    'ExhaustedCandidates',
    'SourceUnavailable',
    # Config
    'get_config',
    'Config',
]
