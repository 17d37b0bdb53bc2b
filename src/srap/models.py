"""Data models for the append engine."""

from dataclasses import dataclass
from typing import Optional

APPENDED = "appended"
DRY_RUN = "dry-run"
SKIPPED = "skipped"


@dataclass
class AppendOutcome:
    """What happened to one target file."""

    path: str
    status: str
    content: Optional[str] = None
    reason: Optional[str] = None
