"""Shell detection and config file resolution."""

import os
from typing import TYPE_CHECKING, Optional

from .config import RunConfig
from .errors import EnvironmentLookupError, UnsupportedShellError

if TYPE_CHECKING:
    from .output import Console

# Checked in order; the first key contained in the shell name wins.
# ion's path is relative to the working directory, not home.
SHELL_CONFIG_FILES = {
    "zsh": "~/.zshrc",
    "bash": "~/.bashrc",
    "nsh": "~/.nshrc",
    "ksh": "~/.kshrc",
    "fish": "~/.config/fish/config.fish",
    "ion": ".config/ion/initrc",
    "tcsh": "~/.cshrc",
}

FULLY_SUPPORTED_SHELLS = ("bash", "zsh")

POSIX_CONFIG_FILES = (
    "~/.bashrc",
    "~/.zshrc",
    "~/.nshrc",
    "~/.kshrc",
)


def home_dir(console: Optional["Console"] = None) -> str:
    """Return $HOME, or an empty string with a warning when it is unset."""
    home = os.environ.get("HOME")
    if home is None:
        if console is not None:
            console.warning("Couldn't find HOME env var! environment variable not found, continuing...")
        return ""
    return home


def expand_home(path: str, home: str) -> str:
    """Replace a leading ~ with the home directory.

    Only the current user's home is known, so ~user paths are left alone.
    """
    if path == "~" or path.startswith("~/"):
        return home + path[1:]
    return path


def shell_from_env() -> str:
    """Get the login shell from $SHELL.

    Raises:
        EnvironmentLookupError: SHELL is not set.
    """
    shell = os.environ.get("SHELL")
    if shell is None:
        raise EnvironmentLookupError("couldn't interpret SHELL: environment variable not found")
    return shell


def detect_shell(shell: str) -> str:
    """Detect which supported shell a $SHELL value names.

    Matching is by containment against the program name, so /bin/zsh,
    /usr/bin/zsh and /usr/local/bin/zsh all give 'zsh'.

    Returns:
        A key of SHELL_CONFIG_FILES.

    Raises:
        UnsupportedShellError: nothing in the table matches.
    """
    name = os.path.basename(shell.rstrip("/"))
    for key in SHELL_CONFIG_FILES:
        if key in name:
            return key
    raise UnsupportedShellError(f"Unsupported shell!: {shell}")


def resolve_targets(config: RunConfig, console: Optional["Console"] = None) -> list[str]:
    """Work out which config files to append to.

    In apply-to-all mode this is the POSIX shell files followed by the
    explicit file, if any. Otherwise it is the explicit file or the file of
    the current login shell.
    """
    if config.apply_to_all:
        candidates = list(POSIX_CONFIG_FILES)
        if config.explicit_file:
            candidates.append(config.explicit_file)
        home = home_dir(console)
        return [expand_home(candidate, home) for candidate in candidates]

    if config.explicit_file:
        target = config.explicit_file
    else:
        shell = shell_from_env()
        if console is not None:
            console.debug(f"SHELL: {shell}")
        detected = detect_shell(shell)
        if detected not in FULLY_SUPPORTED_SHELLS and console is not None:
            console.debug(f"{detected} support is experimental")
        target = SHELL_CONFIG_FILES[detected]

    return [expand_home(target, home_dir(console))]
