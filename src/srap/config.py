"""Configuration models for srap."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .logging import get_logger

if TYPE_CHECKING:
    from .output import Console


class RunConfig(BaseModel):
    """Settings for one run, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    apply_to_all: bool = Field(
        default=False,
        description="Append to every known POSIX shell config file",
    )
    dry_run: bool = Field(default=False, description="Skip the final write")
    explicit_file: Optional[str] = Field(
        default=None, description="Config file given with -f/--file"
    )
    no_color: bool = Field(default=False, description="Plain output without ANSI codes")
    verbose: bool = Field(default=False, description="Print diagnostic lines")


class Defaults(BaseModel):
    """Default flag values read from the YAML defaults file."""

    model_config = ConfigDict(extra="forbid")

    all: bool = False
    dry_run: bool = False
    no_color: bool = False
    verbose: bool = False
    file: Optional[str] = None


def find_defaults_file() -> Optional[Path]:
    """Find the defaults file.

    Search order:
    1. SRAP_CONFIG environment variable
    2. ~/.config/srap/config.yaml
    """
    env_path = os.environ.get("SRAP_CONFIG")
    if env_path:
        return Path(env_path).expanduser()

    home = os.environ.get("HOME")
    if not home:
        return None

    candidate = Path(home) / ".config" / "srap" / "config.yaml"
    if candidate.is_file():
        return candidate
    return None


def load_defaults(
    path: Optional[Path] = None, console: Optional["Console"] = None
) -> Defaults:
    """Load default flag values.

    A broken defaults file never stops a run: problems are logged, shown as a
    warning when a console is given, and the built-in defaults are used.

    Args:
        path: Path to the YAML file. If None, will search for it.
        console: Console used to warn about an unusable file.

    Returns:
        Loaded Defaults object.
    """
    logger = get_logger()

    if path is None:
        path = find_defaults_file()
    if path is None:
        return Defaults()

    problem = None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError("expected a mapping at the top level")
        defaults = Defaults.model_validate(data)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        problem = f"Ignoring defaults file {path}: {e}"
    else:
        logger.debug(f"Loaded defaults from {path}: {defaults.model_dump()}")
        return defaults

    logger.warning(problem)
    if console is not None:
        console.warning(problem)
    return Defaults()
