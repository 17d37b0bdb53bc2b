"""Terminal output for srap."""

import sys
from typing import Optional, TextIO

RED_BOLD = "\x1b[31;1m"
MAGENTA_BOLD = "\x1b[35;1m"
CYAN = "\x1b[36m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

HELP_TEXT = """srap - the Shell Rc APpender

Usage: srap [options] <line to append>
Options:
-a / --all             : append line to all POSIX-compliant shells
-d / --dry-run         : do a dry run of the program
-f / --file <filename> : specify a file
-h / --help            : show this help
-n / --no-color        : no colored output
-v / --verbose         : verbose output

Supports bash, ksh, nsh, zsh as POSIX-compliant, and fish, tcsh, and ion shells
(stable for both bash and zsh, everything else experimental)"""


def print_help(stream: Optional[TextIO] = None) -> None:
    """Print the usage text."""
    print(HELP_TEXT, file=stream or sys.stdout)


class Console:
    """Writes status lines, colored unless no_color is set."""

    def __init__(self, no_color: bool = False, verbose: bool = False, stream: Optional[TextIO] = None):
        self.no_color = no_color
        self.verbose = verbose
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output.
        return self._stream or sys.stdout

    def style(self, text: str, code: str) -> str:
        if self.no_color:
            return text
        return f"{code}{text}{RESET}"

    def echo(self, message: str) -> None:
        print(message, file=self.stream)

    def debug(self, message: str) -> None:
        """Print a diagnostic line when verbose."""
        if self.verbose:
            self.echo(message)

    def warning(self, message: str) -> None:
        self.echo(self.style(message, RED_BOLD))

    def error(self, message: str) -> None:
        self.echo(self.style(message, RED_BOLD))

    def dry_run_notice(self) -> None:
        self.echo(self.style("Doing a dry run...", RED_BOLD))

    def not_found(self, path: str) -> None:
        self.echo(f"{self.style(path, CYAN)} {self.style('not found', RED_BOLD)}")

    def appending(self, line: str, path: str) -> None:
        """Announce an append; line is shown without its leading newline."""
        shown = line[1:] if line.startswith("\n") else line
        self.echo(
            f"{self.style('Appending', MAGENTA_BOLD)} \"{shown}\" "
            f"{self.style('to', MAGENTA_BOLD)} {self.style(path, CYAN)}"
        )

    def success(self) -> None:
        self.echo(self.style("Now source the config file and you're all ready to go! :3", GREEN))
