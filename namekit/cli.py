#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for syllable-chain name generation.

Usage:
    namekit generate --elven -n 5
    namekit generate --language goblin --short
    namekit dump --roman
    namekit check --file my_language.txt
    namekit languages
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from namekit import __version__
from namekit.config import config
from namekit.errors import InvalidLanguage, NameKitError
from namekit.generators import NORMAL, SHORT, Language, load_file, load_language
from namekit.generators.entropy import seeded
from namekit.settings import get_setting, require_setting

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

LANGUAGE_FLAGS = [
    ('-c', '--curse', Language.CURSE),
    ('-d', '--demonic', Language.DEMONIC),
    ('-e', '--elven', Language.ELVEN),
    ('-f', '--fantasy', Language.FANTASY),
    ('-g', '--goblin', Language.GOBLIN),
    ('-r', '--roman', Language.ROMAN),
]

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def result(self, line: str):
        """Primary output; printed even in quiet mode."""
        print(line)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, soft_wrap=True)

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"OK: {msg}", markup=False, soft_wrap=True)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return
        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def setup_logging(level: str = None):
    level = (level or get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def add_source_arguments(p: argparse.ArgumentParser):
    """Language selection shared by generate, dump and check."""
    group = p.add_mutually_exclusive_group()
    group.add_argument('--language', '-l', help='Bundled language name')
    for short, long, language in LANGUAGE_FLAGS:
        group.add_argument(short, long, dest='language', action='store_const',
                           const=language.value, help=f'Use the {language.value} language')
    group.add_argument('--random', '-x', action='store_true', help='Use a random language')
    group.add_argument('--file', help='Word-list file to load instead of a bundled language')


def make_rng(args):
    seed = args.seed if getattr(args, 'seed', None) is not None else config().seed
    return seeded(seed)


def resolve_generator(args, rng, strict: bool = True):
    """Load the generator selected by the source arguments."""
    if getattr(args, 'file', None):
        return load_file(args.file, strict=strict, rng=rng)

    if getattr(args, 'random', False):
        language = Language.random(rng)
    else:
        language = Language.parse(args.language or config().default_language)

    directory = config().language_dir
    return load_language(language, strict=strict, rng=rng, directory=directory)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    rng = make_rng(args)
    generator = resolve_generator(args, rng)
    profile = SHORT if args.short else NORMAL
    name_format = require_setting('cli.name_format')

    for _ in range(args.count):
        first, last = generator.generate_names(2, profile=profile, rng=rng)
        out.result(name_format.format(language=generator.name, first=first, last=last))

    return 0


def cmd_dump(args, out: Output):
    """Print every syllable of a language in word-list form."""
    rng = make_rng(args)
    generator = resolve_generator(args, rng, strict=False)

    for line in generator.dump():
        out.result(line)

    if generator.invalid_lines:
        out.error(f"{len(generator.invalid_lines)} line(s) could not be parsed; run 'check' for details")
        return 1
    return 0


def cmd_check(args, out: Output):
    """Validate a language and report problems."""
    rng = make_rng(args)
    generator = resolve_generator(args, rng, strict=False)

    out.table(
        ['Prefixes', 'Centers', 'Suffixes', 'Invalid'],
        [[len(generator.prefixes), len(generator.centers),
          len(generator.suffixes), len(generator.invalid_lines)]],
        title=generator.name,
    )

    if generator.invalid_lines:
        out.table(['#', 'Line'],
                  [[i, repr(line)] for i, line in enumerate(generator.invalid_lines, 1)],
                  title='Invalid lines')

    if generator.is_valid():
        out.success(f"{generator.name} is valid")
        return 0

    out.error(str(InvalidLanguage(generator)))
    return 1


def cmd_languages(args, out: Output):
    """List bundled languages."""
    rows = [[language.value, language.filename] for language in Language]
    if out.quiet:
        for language in Language:
            out.result(language.value)
    else:
        out.table(['Language', 'File'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Random Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate --elven -n 5
  %(prog)s generate --language goblin --short --seed 7
  %(prog)s generate --file my_language.txt
  %(prog)s dump --roman
  %(prog)s check --file my_language.txt
  %(prog)s languages
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    add_source_arguments(p)
    p.add_argument('-n', '--count', type=int, default=require_setting('cli.default_count'),
                   help='Number of names (default: %(default)s)')
    p.add_argument('--short', '-s', action='store_true', help='Prefer two-syllable names')
    p.add_argument('--seed', type=int, help='Random seed for reproducibility')
    p.add_argument('--verbose', '-v', action='store_true', help='Show tracebacks on errors')

    # --- dump ---
    p = subparsers.add_parser('dump', help='Print the syllables of a language')
    add_source_arguments(p)

    # --- check ---
    p = subparsers.add_parser('check', help='Validate a language word-list')
    add_source_arguments(p)

    # --- languages ---
    subparsers.add_parser('languages', aliases=['ls'], help='List bundled languages')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'ls': 'languages',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    if getattr(args, 'count', 1) < 1:
        out.error("--count must be at least 1")
        return 1

    commands = {
        'generate': cmd_generate,
        'dump': cmd_dump,
        'check': cmd_check,
        'languages': cmd_languages,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (NameKitError, ValueError) as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                logger.exception("command %s failed", command)
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
