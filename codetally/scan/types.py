"""Datatypes shared by the scan session and the traversal engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import TraversalError
from ..gitignore import DEFAULT_IGNORE_FILENAME

VIEW_MODE_FILES = "files"
VIEW_MODE_DIRS = "dirs"
VIEW_MODES = (VIEW_MODE_FILES, VIEW_MODE_DIRS)
DEFAULT_CAPTURE_DEPTH = 1


class DirEntryDecision(enum.Enum):
    """Outcome of evaluating the filters for one directory entry."""

    DESCEND = "descend"
    PRUNE_SUBTREE = "prune"
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class ScanOptions:
    """User-facing scan configuration, fixed before the first root is walked.

    ``match`` and ``ignore`` are whitespace-separated regular expressions
    tested against root-relative POSIX paths.
    """

    match: str = ""
    ignore: str = ""
    view_mode: str = VIEW_MODE_FILES
    capture_depth: int = DEFAULT_CAPTURE_DEPTH
    ignore_filename: str = DEFAULT_IGNORE_FILENAME
    debug: bool = False
    show_matched: bool = False
    show_ignored: bool = False

    @property
    def captures_directories(self) -> bool:
        return self.view_mode == VIEW_MODE_DIRS


@dataclass(frozen=True)
class CapturedSubdirectory:
    """Directory recorded in directory-summary mode, relative to its root."""

    root: Path
    relative: str

    @property
    def path(self) -> Path:
        return self.root / self.relative


@dataclass
class ScanReport:
    """Result of one ``scan`` call across one or more roots."""

    roots: list[Path] = field(default_factory=list)
    dispatched: int = 0
    captured: list[CapturedSubdirectory] = field(default_factory=list)
    errors: list[TraversalError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


__all__ = [
    "VIEW_MODE_FILES",
    "VIEW_MODE_DIRS",
    "VIEW_MODES",
    "DEFAULT_CAPTURE_DEPTH",
    "DirEntryDecision",
    "ScanOptions",
    "CapturedSubdirectory",
    "ScanReport",
]
