"""Per-root ignore-file loading and gitignore-style path matching.

Each scan root may carry an ignore file (``.gitignore`` by default) at its top
level. The file is parsed once per root with ``pathspec`` and queried with
root-relative POSIX paths during the walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pathspec

DEFAULT_IGNORE_FILENAME = ".gitignore"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Compiled ignore-file rules for one scan root.

    ``spec`` follows gitignore precedence: later rules override earlier ones,
    ``!`` rules re-include, and rules ending in ``/`` only match directories.
    """

    root: Path
    source: Path
    spec: pathspec.GitIgnoreSpec

    def is_ignored(self, relative_path: str, is_dir: bool = False) -> bool:
        """Return whether root-relative ``relative_path`` is excluded."""
        candidate = relative_path.strip("/")
        if not candidate:
            return False
        if is_dir:
            candidate += "/"
        return self.spec.match_file(candidate)


def load_ignore_file(root: Path, filename: str = DEFAULT_IGNORE_FILENAME) -> GitIgnoreMatcher | None:
    """Parse ``root/filename`` into a matcher.

    Returns ``None`` when the file is missing, unreadable, or not valid UTF-8.
    Absence is the common case and is not treated as an error.
    """
    source = root / filename
    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No ignore file loaded for %s: %s", root, exc)
        return None
    return GitIgnoreMatcher(
        root=root,
        source=source,
        spec=pathspec.GitIgnoreSpec.from_lines(lines),
    )


class IgnoreSet:
    """Mapping of scan root to its ignore-file matcher.

    Entries are created lazily and exactly once per root; a root without an
    ignore file maps to ``None``. Matchers are never reloaded, so edits made to
    an ignore file during a scan are not observed.
    """

    def __init__(self, filename: str = DEFAULT_IGNORE_FILENAME) -> None:
        self.filename = filename
        self._matchers: dict[Path, GitIgnoreMatcher | None] = {}

    def __contains__(self, root: object) -> bool:
        return root in self._matchers

    def __len__(self) -> int:
        return len(self._matchers)

    def load(self, root: Path) -> GitIgnoreMatcher | None:
        """Return the matcher for ``root``, loading it on first request."""
        if root in self._matchers:
            return self._matchers[root]
        matcher = load_ignore_file(root, self.filename)
        if matcher is not None:
            logger.debug("Loaded ignore rules from %s", matcher.source)
        self._matchers[root] = matcher
        return matcher

    def get(self, root: Path) -> GitIgnoreMatcher | None:
        """Return the already-loaded matcher for ``root`` without loading."""
        return self._matchers.get(root)


__all__ = [
    "DEFAULT_IGNORE_FILENAME",
    "GitIgnoreMatcher",
    "IgnoreSet",
    "load_ignore_file",
]
