"""Scan-root normalization and overlap detection."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def normalized_scan_roots(raw_roots: Iterable[Path | str], default_root: Path | None = None) -> list[Path]:
    """Return resolved roots preserving order and duplicates.

    Falls back to ``default_root`` when no roots are given. Duplicates are
    kept; the seen-path index suppresses repeated files.
    """
    roots = [Path(raw_root).expanduser().resolve() for raw_root in raw_roots]
    if not roots and default_root is not None:
        roots.append(default_root.resolve())
    return roots


def overlapping_roots(roots: list[Path]) -> list[tuple[Path, Path]]:
    """Return ``(outer, inner)`` pairs where ``inner`` lies under ``outer``."""
    pairs: list[tuple[Path, Path]] = []
    for outer in roots:
        for inner in roots:
            if inner == outer:
                continue
            if inner.is_relative_to(outer):
                pairs.append((outer, inner))
    return pairs


__all__ = [
    "normalized_scan_roots",
    "overlapping_roots",
]
