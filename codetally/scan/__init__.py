"""Traversal and filtering engine.

This package contains the non-UI scan primitives:
- scan options, per-entry decisions, and report datatypes
- the ``ScanSession`` owning compiled filters and the seen-path index
- the depth-first walker applying filters in precedence order
- directory-summary depth capture and root normalization helpers
"""

from __future__ import annotations

from .types import (
    DEFAULT_CAPTURE_DEPTH,
    VIEW_MODE_DIRS,
    VIEW_MODE_FILES,
    VIEW_MODES,
    CapturedSubdirectory,
    DirEntryDecision,
    ScanOptions,
    ScanReport,
)
from .depth import is_at_depth, path_depth
from .roots import normalized_scan_roots, overlapping_roots
from .session import ScanSession, SeenPathIndex
from .walk import VCS_DIR_NAMES, evaluate_directory, evaluate_file, is_vcs_dir, scan_roots, walk_root

__all__ = [
    "DEFAULT_CAPTURE_DEPTH",
    "VIEW_MODE_DIRS",
    "VIEW_MODE_FILES",
    "VIEW_MODES",
    "CapturedSubdirectory",
    "DirEntryDecision",
    "ScanOptions",
    "ScanReport",
    "is_at_depth",
    "path_depth",
    "normalized_scan_roots",
    "overlapping_roots",
    "ScanSession",
    "SeenPathIndex",
    "VCS_DIR_NAMES",
    "evaluate_directory",
    "evaluate_file",
    "is_vcs_dir",
    "scan_roots",
    "walk_root",
]
