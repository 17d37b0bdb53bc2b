"""Command-line token scanning.

Flags are looked up anywhere in the token list rather than parsed left to
right, and the line to append is the run of tokens starting at the first one
that does not begin with a dash. Only ``-f``/``--file`` takes a value.
"""

from dataclasses import dataclass, field
from typing import Optional

from .config import Defaults, RunConfig
from .errors import UsageError

ALL_FLAGS = ("-a", "--all")
DRY_RUN_FLAGS = ("-d", "--dry-run")
VERBOSE_FLAGS = ("-v", "--verbose")
NO_COLOR_FLAGS = ("-n", "--no-color")
FILE_FLAGS = ("-f", "--file")
HELP_FLAGS = ("-h", "--help")


@dataclass
class ParsedArgs:
    """Result of scanning the command line."""

    config: RunConfig
    residual: list[str] = field(default_factory=list)
    file_index: Optional[int] = None


def _has_any(tokens: list[str], flags: tuple[str, ...]) -> bool:
    return any(flag in tokens for flag in flags)


def wants_help(tokens: list[str]) -> bool:
    """True when there are no tokens or -h/--help appears anywhere."""
    return not tokens or _has_any(tokens, HELP_FLAGS)


def parse_args(tokens: list[str], defaults: Optional[Defaults] = None) -> ParsedArgs:
    """Scan tokens for flags.

    Args:
        tokens: Command-line tokens without the program name.
        defaults: Values from the defaults file; flags can only switch them on.

    Returns:
        ParsedArgs with the run configuration and the residual tokens.

    Raises:
        UsageError: -f/--file is the last token.
    """
    defaults = defaults or Defaults()
    residual = list(tokens)

    explicit_file = defaults.file
    file_index = None
    flag_positions = [i for i, token in enumerate(residual) if token in FILE_FLAGS]
    if flag_positions:
        flag_index = flag_positions[0]
        file_index = flag_index + 1
        if file_index >= len(residual):
            raise UsageError("You must provide a filename")
        explicit_file = residual[file_index]
        del residual[flag_index:file_index + 1]

    config = RunConfig(
        apply_to_all=defaults.all or _has_any(residual, ALL_FLAGS),
        dry_run=defaults.dry_run or _has_any(residual, DRY_RUN_FLAGS),
        explicit_file=explicit_file or None,
        no_color=defaults.no_color or _has_any(residual, NO_COLOR_FLAGS),
        verbose=defaults.verbose or _has_any(residual, VERBOSE_FLAGS),
    )
    return ParsedArgs(config=config, residual=residual, file_index=file_index)


def line_start(residual: list[str]) -> Optional[int]:
    """Index of the first token that does not start with a dash."""
    for index, token in enumerate(residual):
        if not token.startswith("-"):
            return index
    return None


def quote_alias(line: str) -> str:
    """Quote the value of a simple ``alias name=value`` line.

    Only applies when the line mentions alias and has no double quote yet.
    Lines without ``=`` are left as they are.
    """
    if "alias" not in line or '"' in line:
        return line
    equals = line.find("=")
    if equals == -1:
        return line
    return f'{line[:equals + 1]}"{line[equals + 1:]}"'


def build_line(residual: list[str], start: int) -> str:
    """Join the line tokens into the text to append, newline first."""
    return quote_alias("\n" + " ".join(residual[start:]))
