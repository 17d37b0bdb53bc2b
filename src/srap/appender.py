"""Append engine: add the line to each target file."""

import os

from .config import RunConfig
from .errors import AppendError
from .logging import get_logger
from .models import APPENDED, DRY_RUN, SKIPPED, AppendOutcome
from .output import Console


def read_config_file(path: str) -> str:
    """Read the full text of a config file.

    Line endings are kept as they are on disk.

    Raises:
        AppendError: The file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise AppendError(f"couldn't read file: {path}, {e}") from e


def encode_content(path: str, content: str) -> bytes:
    """Encode new file content as UTF-8.

    Raises:
        AppendError: The content holds characters UTF-8 cannot encode,
            such as undecodable command-line bytes.
    """
    try:
        return content.encode("utf-8")
    except UnicodeError as e:
        raise AppendError(f"can't encode new content for {path}: {e}") from e


def write_config_file(path: str, data: bytes) -> None:
    """Overwrite a config file with data. Not atomic.

    Raises:
        AppendError: The write failed.
    """
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise AppendError(f"writing file failed! {path}: {e}") from e


def run(config: RunConfig, line: str, targets: list[str], console: Console) -> list[AppendOutcome]:
    """Append line to every target, in order.

    In apply-to-all mode, targets that are not regular files are reported
    and skipped. Any other failure stops the loop; files already written
    stay written.

    Returns:
        One AppendOutcome per target.
    """
    logger = get_logger()
    outcomes = []

    for path in targets:
        console.debug(f"Using presumed config file path: {path}")

        if config.apply_to_all and not os.path.isfile(path):
            console.not_found(path)
            logger.info(f"Skipping {path}: not found")
            outcomes.append(AppendOutcome(path=path, status=SKIPPED, reason="not found"))
            continue

        new_content = read_config_file(path) + line
        data = encode_content(path, new_content)
        console.appending(line, path)

        if config.dry_run:
            logger.info(f"Dry run, not writing {path}")
            outcomes.append(AppendOutcome(path=path, status=DRY_RUN, content=new_content))
            continue

        write_config_file(path, data)
        logger.info(f"Appended {line.strip()!r} to {path}")
        outcomes.append(AppendOutcome(path=path, status=APPENDED, content=new_content))

    return outcomes
