"""Depth-first traversal engine with ordered per-entry filtering.

Every directory entry is evaluated against the filter sources in a fixed
order:

directories
    version-control name -> directory-summary capture -> ignore file
files
    match patterns -> ignore file (only when no match pattern hit) ->
    ignore patterns -> supported extension -> seen-path index

Pruned directories are never enumerated, so ignore-file directory rules win
over match patterns for anything beneath them. Ignore patterns always apply,
even to files a match pattern selected.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..errors import TraversalError
from ..languages import file_extension, is_supported_extension
from ..patterns import Matcher, first_match
from .depth import is_at_depth
from .roots import normalized_scan_roots, overlapping_roots
from .session import ScanSession
from .types import DirEntryDecision, ScanReport

VCS_DIR_NAMES = frozenset({".git", ".svn", ".hg", ".bzr", ".cvs"})

logger = logging.getLogger(__name__)


def is_vcs_dir(name: str) -> bool:
    """Return whether ``name`` is a version-control metadata directory."""
    return name in VCS_DIR_NAMES


def _posix(relative: str) -> str:
    return relative.replace(os.sep, "/") if os.sep != "/" else relative


def evaluate_directory(session: ScanSession, root: Path, relative: str) -> DirEntryDecision:
    """Decide whether to descend into the directory at ``root/relative``.

    Records a captured subdirectory as a side effect in directory-summary mode.
    """
    name = os.path.basename(relative)
    if is_vcs_dir(name):
        return DirEntryDecision.PRUNE_SUBTREE

    options = session.options
    if options.captures_directories and is_at_depth(relative, options.capture_depth):
        session.capture(root, relative)

    matcher = session.ignore_files.get(root)
    if matcher is not None and matcher.is_ignored(_posix(relative), is_dir=True):
        if options.debug:
            logger.debug("Directory ignored by %s rules: %s", options.ignore_filename, root / relative)
        return DirEntryDecision.PRUNE_SUBTREE
    return DirEntryDecision.DESCEND


def _log_missed_matchers(matchers: tuple[Matcher, ...], hit: Matcher | None, path: Path) -> None:
    for matcher in matchers:
        if matcher is hit:
            return
        logger.debug("Not matched: %s with regexp: %s", path, matcher.source)


def evaluate_file(session: ScanSession, root: Path, path: Path, relative: str) -> DirEntryDecision:
    """Decide whether the file at ``path`` should be dispatched."""
    options = session.options
    rel_posix = _posix(relative)

    hit = first_match(session.match_patterns, rel_posix)
    if options.debug:
        _log_missed_matchers(session.match_patterns, hit, path)
    if hit is not None and session.verbose_matches:
        logger.info("File matched: %s", path)
    if session.match_patterns and hit is None:
        return DirEntryDecision.REJECT

    # A match-pattern hit overrides ignore-file rules for files.
    if hit is None:
        gitignore = session.ignore_files.get(root)
        if gitignore is not None and gitignore.is_ignored(rel_posix):
            if options.debug:
                logger.debug("File ignored by %s rules: %s", options.ignore_filename, path)
            return DirEntryDecision.REJECT

    ignored_by = first_match(session.ignore_patterns, rel_posix)
    if ignored_by is not None:
        if session.verbose_ignores:
            logger.info("File ignored: %s with regexp: %s", path, ignored_by.source)
        return DirEntryDecision.REJECT

    if not is_supported_extension(file_extension(path), session.registry):
        if options.debug:
            logger.debug("Unsupported file type: %s", path)
        return DirEntryDecision.REJECT

    if path in session.seen:
        return DirEntryDecision.REJECT
    return DirEntryDecision.ACCEPT


def _read_directory(root: Path, directory: Path) -> list[os.DirEntry[str]]:
    """Enumerate ``directory`` fully, converting failures to ``TraversalError``."""
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        raise TraversalError(root, directory, exc) from exc


def _is_directory(root: Path, entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise TraversalError(root, Path(entry.path), exc) from exc


def _accept(session: ScanSession, path: Path) -> bool:
    if session.options.debug:
        logger.debug("Add new file: %s", path)
    return session.dispatch(path)


def walk_root(session: ScanSession, root: Path) -> int:
    """Walk one root depth-first, dispatching accepted files.

    The root's ignore file is loaded before the first entry is read. Returns
    the number of files dispatched. Raises ``TraversalError`` as soon as any
    directory under ``root`` cannot be enumerated.
    """
    if is_vcs_dir(root.name):
        return 0
    session.ignore_files.load(root)

    if not root.is_dir() and root.exists():
        decision = evaluate_file(session, root, root, root.name)
        if decision is DirEntryDecision.ACCEPT and _accept(session, root):
            return 1
        return 0

    dispatched = 0
    stack: list[Iterator[os.DirEntry[str]]] = [iter(_read_directory(root, root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        path = Path(entry.path)
        relative = os.path.relpath(entry.path, root)
        if _is_directory(root, entry):
            if evaluate_directory(session, root, relative) is DirEntryDecision.DESCEND:
                stack.append(iter(_read_directory(root, path)))
            continue

        if evaluate_file(session, root, path, relative) is DirEntryDecision.ACCEPT:
            if _accept(session, path):
                dispatched += 1
    return dispatched


def scan_roots(
    session: ScanSession,
    roots: Iterable[Path | str],
    *,
    stop_on_error: bool = True,
) -> ScanReport:
    """Walk each root sequentially and collect a ``ScanReport``.

    Traversal errors are recorded per root instead of raised. With
    ``stop_on_error`` the scan ends at the first failing root; otherwise the
    remaining roots are still walked.
    """
    resolved = normalized_scan_roots(roots)
    for outer, inner in overlapping_roots(resolved):
        logger.debug("Root %s lies under %s; shared files are dispatched once", inner, outer)

    report = ScanReport(roots=resolved)
    seen_before = len(session.seen)
    captured_before = len(session.captured)
    for root in resolved:
        try:
            walk_root(session, root)
        except TraversalError as exc:
            report.errors.append(exc)
            if stop_on_error:
                break
    report.dispatched = len(session.seen) - seen_before
    report.captured = session.captured[captured_before:]
    return report


__all__ = [
    "VCS_DIR_NAMES",
    "is_vcs_dir",
    "evaluate_directory",
    "evaluate_file",
    "walk_root",
    "scan_roots",
]
