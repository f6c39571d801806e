#!/usr/bin/env python3
"""
Configuration Management
========================
Loads runtime overrides from a .env file and the process environment.

Recognised variables:
    NAMEKIT_LANGUAGE_DIR  - directory holding "<Language>.txt" word-lists
    NAMEKIT_LANGUAGE      - language used when none is requested
    NAMEKIT_SEED          - integer seed for reproducible output
"""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from namekit.settings import get_setting, resolve_path


# =============================================================================
# Application Configuration
# =============================================================================

@dataclass
class Config:
    """Application configuration"""
    language_dir: Optional[Path] = None
    default_language: Optional[str] = None
    seed: Optional[int] = None

    @property
    def has_seed(self) -> bool:
        return self.seed is not None

    @property
    def has_language_dir(self) -> bool:
        return self.language_dir is not None


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        # Look for .env in package parent directory
        env_path = Path(__file__).parent.parent / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text(encoding='utf-8').splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()
                os.environ.setdefault(key.strip(), value.strip())

    return env_vars


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"NAMEKIT_SEED must be an integer, got {raw!r}")


def get_config(env_path: Path = None) -> Config:
    """Get configuration from environment, falling back to app.yaml."""
    env = load_env(env_path)

    language_dir = env.get('NAMEKIT_LANGUAGE_DIR') or os.environ.get('NAMEKIT_LANGUAGE_DIR')
    if language_dir is None:
        language_dir = get_setting('languages.directory')

    return Config(
        language_dir=resolve_path(language_dir) if language_dir else None,
        default_language=(env.get('NAMEKIT_LANGUAGE') or os.environ.get('NAMEKIT_LANGUAGE')
                          or get_setting('languages.default')),
        seed=_parse_seed(env.get('NAMEKIT_SEED') or os.environ.get('NAMEKIT_SEED')),
    )


# Singleton config
_config = None

def config() -> Config:
    """Get the singleton config instance."""
    global _config
    if _config is None:
        _config = get_config()
    return _config


def reset_config() -> None:
    """Drop the cached singleton so the next config() call re-reads the environment."""
    global _config
    _config = None
