"""
Tests for CLI Commands
======================
Tests for the namekit command-line interface in namekit/cli.py.
"""

import os
import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit import __version__
from namekit.cli import main
from namekit.config import reset_config
from namekit.generators import Language, Syllable

ENV_KEYS = ('NAMEKIT_LANGUAGE_DIR', 'NAMEKIT_LANGUAGE', 'NAMEKIT_SEED')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without NAMEKIT_* overrides and with a fresh config."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


def run_cli(*args):
    env = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
    return subprocess.run(
        [sys.executable, "-m", "namekit", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        env=env,
    )


@pytest.fixture
def word_list(tmp_path):
    path = tmp_path / "Min.txt"
    path.write_text("-a\nb\n+c\n", encoding="utf-8")
    return path


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "namekit" in result.stdout.lower()
        assert __version__ in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout
        assert "check" in result.stdout

    def test_generate_help(self):
        result = run_cli("generate", "--help")
        assert result.returncode == 0
        assert "--count" in result.stdout
        assert "--elven" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIGenerate:
    """Tests for generate command."""

    def test_generate_elven(self):
        result = run_cli("generate", "--elven", "-n", "3", "--seed", "1")
        assert result.returncode == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 3
        for line in lines:
            assert line.startswith("Elven: ")
            first, last = line[len("Elven: "):].split(" ")
            assert first[0].isupper()
            assert last[0].isupper()

    def test_seed_reproducible(self, capsys):
        assert main(["generate", "--goblin", "-n", "5", "--seed", "42"]) == 0
        first = capsys.readouterr().out
        assert main(["generate", "--goblin", "-n", "5", "--seed", "42"]) == 0
        assert capsys.readouterr().out == first

    def test_seed_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NAMEKIT_SEED", "9")
        reset_config()
        main(["generate", "--roman", "-n", "4"])
        first = capsys.readouterr().out
        main(["generate", "--roman", "-n", "4"])
        assert capsys.readouterr().out == first

    def test_default_language(self, capsys):
        assert main(["generate", "--seed", "3"]) == 0
        assert capsys.readouterr().out.startswith("Fantasy: ")

    def test_language_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NAMEKIT_LANGUAGE", "demonic")
        reset_config()
        assert main(["generate", "--seed", "3"]) == 0
        assert capsys.readouterr().out.startswith("Demonic: ")

    @pytest.mark.parametrize("flag, language", [
        ("-c", Language.CURSE),
        ("-d", Language.DEMONIC),
        ("-e", Language.ELVEN),
        ("-f", Language.FANTASY),
        ("-g", Language.GOBLIN),
        ("-r", Language.ROMAN),
    ])
    def test_language_flags(self, capsys, flag, language):
        assert main(["generate", flag, "--seed", "1"]) == 0
        assert capsys.readouterr().out.startswith(f"{language.value}: ")

    def test_language_option(self, capsys):
        assert main(["g", "--language", "ELVEN", "--seed", "1", "--short"]) == 0
        assert capsys.readouterr().out.startswith("Elven: ")

    def test_random_language(self, capsys):
        assert main(["gen", "-x", "-n", "2", "--seed", "8"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        prefixes = {line.split(":")[0] for line in lines}
        assert len(prefixes) == 1
        assert prefixes.pop() in {l.value for l in Language}

    def test_file(self, capsys, word_list):
        assert main(["generate", "--file", str(word_list), "-n", "2", "--seed", "1"]) == 0
        for line in capsys.readouterr().out.strip().splitlines():
            assert line.startswith("Min: A")

    def test_unknown_language(self, capsys):
        assert main(["generate", "--language", "dwarven"]) == 1
        assert "Unknown language" in capsys.readouterr().err

    def test_missing_file(self, capsys, tmp_path):
        assert main(["generate", "--file", str(tmp_path / "none.txt")]) == 1
        assert "unavailable" in capsys.readouterr().err

    def test_invalid_file_refused(self, capsys, tmp_path):
        path = tmp_path / "Bad.txt"
        path.write_text("-a\nb\n+c\n3\n", encoding="utf-8")
        assert main(["generate", "--file", str(path)]) == 1
        assert "invalid language Bad" in capsys.readouterr().err

    def test_dead_end_language(self, capsys, tmp_path):
        path = tmp_path / "Sparse.txt"
        path.write_text("-a +c\ne\n+o\n", encoding="utf-8")
        assert main(["generate", "--file", str(path)]) == 1
        assert "no " in capsys.readouterr().err

    def test_count_must_be_positive(self, capsys):
        assert main(["generate", "-n", "0"]) == 1
        assert "--count" in capsys.readouterr().err

    def test_flags_mutually_exclusive(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", "--elven", "--goblin"])
        assert excinfo.value.code == 2


class TestCLIDump:
    """Tests for dump command."""

    def test_dump_roman(self, capsys):
        assert main(["dump", "--roman"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines
        for line in lines:
            assert Syllable.parse(line).to_string() == line

    def test_dump_orders_groups(self, capsys, word_list):
        assert main(["dump", "--file", str(word_list)]) == 0
        assert capsys.readouterr().out.splitlines() == ["-a", "b", "+c"]

    def test_dump_reports_bad_lines(self, capsys, tmp_path):
        path = tmp_path / "Bad.txt"
        path.write_text("-a\nb\n+c\nb4d\n", encoding="utf-8")
        assert main(["dump", "--file", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["-a", "b", "+c"]
        assert "1 line(s)" in captured.err


class TestCLICheck:
    """Tests for check command."""

    def test_check_bundled(self, capsys):
        assert main(["check", "--elven"]) == 0
        assert "Elven is valid" in capsys.readouterr().out

    def test_check_bad_file(self, tmp_path):
        path = tmp_path / "Bad.txt"
        path.write_text("-a\n#$@!\n+c\n", encoding="utf-8")
        result = run_cli("check", "--file", str(path))
        assert result.returncode == 1
        assert "no centers" in result.stderr
        assert "1 invalid line(s)" in result.stderr

    def test_check_quiet(self, capsys, word_list):
        assert main(["-q", "check", "--file", str(word_list)]) == 0
        assert capsys.readouterr().out == ""


class TestCLILanguages:
    """Tests for languages command."""

    def test_quiet_lists_names(self):
        result = run_cli("-q", "languages")
        assert result.returncode == 0
        assert result.stdout.split() == [l.value for l in Language]

    def test_table(self, capsys):
        assert main(["ls"]) == 0
        out = capsys.readouterr().out
        for language in Language:
            assert language.filename in out
