"""
Tests for Settings and Configuration
====================================
app.yaml access (namekit/settings.py) and environment overrides
(namekit/config.py).
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.config import Config, config, get_config, load_env, reset_config
from namekit.generators.languages import LANGUAGES_DIR
from namekit.settings import (
    PACKAGE_ROOT,
    get_setting,
    load_app_config,
    require_setting,
    resolve_path,
)

ENV_KEYS = ('NAMEKIT_LANGUAGE_DIR', 'NAMEKIT_LANGUAGE', 'NAMEKIT_SEED')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def no_env_file(tmp_path):
    return tmp_path / "missing.env"


class TestSettings:
    """app.yaml lookups."""

    def test_loads_mapping(self):
        assert isinstance(load_app_config(), dict)

    def test_dotted_lookup(self):
        assert get_setting("phonetics.vowels") == "aeiou"
        assert get_setting("generation.min_syllables") == 2
        assert get_setting("generation.profiles.normal.weights") == [4, 10, 3, 1]

    def test_missing_returns_default(self):
        assert get_setting("generation.nope") is None
        assert get_setting("generation.nope", 7) == 7
        assert get_setting("phonetics.vowels.deeper", "x") == "x"

    def test_require_setting(self):
        assert require_setting("languages.default") == "Fantasy"
        with pytest.raises(ValueError, match="generation.nope"):
            require_setting("generation.nope")

    def test_resolve_relative(self):
        assert resolve_path("generators/languages") == LANGUAGES_DIR.resolve()

    def test_resolve_absolute(self, tmp_path):
        assert resolve_path(str(tmp_path)) == tmp_path

    def test_resolve_custom_base(self, tmp_path):
        assert resolve_path("lists", base=tmp_path) == (tmp_path / "lists").resolve()

    def test_resolve_requires_value(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    def test_package_root(self):
        assert (PACKAGE_ROOT / "configs" / "app.yaml").is_file()


class TestConfig:
    """Environment and .env overrides."""

    def test_defaults(self, no_env_file):
        cfg = get_config(no_env_file)
        assert isinstance(cfg, Config)
        assert cfg.default_language == "Fantasy"
        assert cfg.language_dir == LANGUAGES_DIR.resolve()
        assert cfg.seed is None
        assert not cfg.has_seed
        assert cfg.has_language_dir

    def test_environment(self, monkeypatch, tmp_path, no_env_file):
        monkeypatch.setenv("NAMEKIT_LANGUAGE", "Goblin")
        monkeypatch.setenv("NAMEKIT_SEED", "12")
        monkeypatch.setenv("NAMEKIT_LANGUAGE_DIR", str(tmp_path))
        cfg = get_config(no_env_file)
        assert cfg.default_language == "Goblin"
        assert cfg.seed == 12
        assert cfg.has_seed
        assert cfg.language_dir == tmp_path

    def test_bad_seed(self, monkeypatch, no_env_file):
        monkeypatch.setenv("NAMEKIT_SEED", "abc")
        with pytest.raises(ValueError, match="NAMEKIT_SEED"):
            get_config(no_env_file)

    def test_env_file(self, monkeypatch, tmp_path):
        # Registered with monkeypatch so load_env's setdefault is undone afterwards.
        monkeypatch.setenv("NAMEKIT_LANGUAGE", "")
        monkeypatch.setenv("NAMEKIT_SEED", "")
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# local overrides\n"
            "NAMEKIT_LANGUAGE = Roman\n"
            "NAMEKIT_SEED=5\n"
            "not a pair\n",
            encoding="utf-8",
        )
        values = load_env(env_file)
        assert values == {"NAMEKIT_LANGUAGE": "Roman", "NAMEKIT_SEED": "5"}

        cfg = get_config(env_file)
        assert cfg.default_language == "Roman"
        assert cfg.seed == 5

    def test_singleton(self):
        assert config() is config()
        first = config()
        reset_config()
        assert config() is not first
