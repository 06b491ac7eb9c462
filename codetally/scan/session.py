"""Scan session state: compiled filters, ignore-file map, and seen-path index.

A ``ScanSession`` owns every piece of mutable state one scan needs, so
independent sessions never share filters or dedup history.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..classify import Classifier, CodeFile, LanguageBuckets
from ..gitignore import IgnoreSet
from ..languages import SUPPORTED_LANGUAGES
from ..patterns import IGNORE, MATCH, Matcher, compile_patterns
from .types import CapturedSubdirectory, ScanOptions, ScanReport

logger = logging.getLogger(__name__)


class SeenPathIndex:
    """Absolute paths already dispatched, in dispatch order."""

    def __init__(self) -> None:
        self._paths: dict[Path, None] = {}

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def add(self, path: Path) -> bool:
        """Record ``path``; return ``False`` when it was already present."""
        if path in self._paths:
            return False
        self._paths[path] = None
        return True


class ScanSession:
    """Configured scan over one or more roots.

    Patterns are compiled in the constructor, so a malformed fragment raises
    ``PatternError`` before any directory is read.
    """

    def __init__(
        self,
        options: ScanOptions | None = None,
        *,
        classifier: Classifier | None = None,
        registry: dict[str, str] | None = None,
    ) -> None:
        self.options = options or ScanOptions()
        if self.options.capture_depth < 1:
            raise ValueError("capture_depth must be >= 1")
        self.match_patterns: tuple[Matcher, ...] = compile_patterns(self.options.match, MATCH)
        self.ignore_patterns: tuple[Matcher, ...] = compile_patterns(self.options.ignore, IGNORE)
        self.registry = dict(SUPPORTED_LANGUAGES if registry is None else registry)
        self.classifier: Classifier = classifier if classifier is not None else LanguageBuckets()
        self.ignore_files = IgnoreSet(self.options.ignore_filename)
        self.seen = SeenPathIndex()
        self.captured: list[CapturedSubdirectory] = []

    @property
    def verbose_matches(self) -> bool:
        return self.options.debug or self.options.show_matched

    @property
    def verbose_ignores(self) -> bool:
        return self.options.debug or self.options.show_ignored

    def capture(self, root: Path, relative: str) -> None:
        """Record a directory-summary subdirectory in traversal order."""
        self.captured.append(CapturedSubdirectory(root=root, relative=relative))

    def dispatch(self, path: Path) -> bool:
        """Hand ``path`` to the classifier and mark it seen.

        Returns ``False`` when the code-file handle cannot be built; the file
        is then skipped and left out of the seen-path index.
        """
        try:
            code_file = CodeFile.from_path(path, self.registry)
        except (OSError, ValueError) as exc:
            logger.info("Skipping %s: %s", path, exc)
            return False
        self.classifier(code_file)
        self.seen.add(path)
        return True

    def scan(self, roots: Iterable[Path | str], *, stop_on_error: bool = True) -> ScanReport:
        """Walk ``roots`` in order; see ``codetally.scan.walk.scan_roots``."""
        from .walk import scan_roots

        return scan_roots(self, roots, stop_on_error=stop_on_error)


__all__ = ["SeenPathIndex", "ScanSession"]
