"""Command-line entry point for srap."""

import sys
from typing import Optional

from . import appender
from .args import NO_COLOR_FLAGS, build_line, line_start, parse_args, wants_help
from .config import load_defaults
from .errors import SrapError
from .logging import get_logger
from .output import Console, print_help
from .shell import resolve_targets


def main(argv: Optional[list[str]] = None) -> int:
    """Run srap.

    Args:
        argv: Command-line tokens without the program name. Defaults to
            sys.argv[1:].

    Returns:
        Process exit status: 0 on success or help, 1 on a fatal error.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    if wants_help(tokens):
        print_help()
        return 0

    logger = get_logger()
    # Flags are not parsed yet, so look for -n directly.
    console = Console(no_color=any(flag in tokens for flag in NO_COLOR_FLAGS))

    try:
        # The line is checked before the defaults file is read.
        parsed = parse_args(tokens)
        start = line_start(parsed.residual)
        if start is None:
            if parsed.config.dry_run:
                console.dry_run_notice()
            print_help()
            return 0

        parsed = parse_args(tokens, load_defaults(console=console))
        config = parsed.config
        console = Console(no_color=config.no_color, verbose=config.verbose)

        if parsed.file_index is not None:
            console.debug(
                f"index: {parsed.file_index}; filename: {config.explicit_file}, args {parsed.residual}"
            )
        console.debug(str(parsed.residual))

        if config.dry_run:
            console.dry_run_notice()

        line = build_line(parsed.residual, start)
        console.debug(f"appending line: `{line}`")

        targets = resolve_targets(config, console)
        logger.debug(f"Resolved targets: {targets}")

        outcomes = appender.run(config, line, targets, console)
        logger.debug(f"Outcomes: {[(o.path, o.status) for o in outcomes]}")
    except SrapError as e:
        logger.error(str(e))
        console.error(str(e))
        return 1

    console.success()
    return 0


if __name__ == "__main__":
    sys.exit(main())
