"""Path-segment counting for directory-summary capture."""

from __future__ import annotations

import os


def path_depth(relative_path: str) -> int:
    """Count the non-blank segments of ``relative_path``.

    The path is decomposed from the leaf upward until the remainder is empty
    or a filesystem root, so leading and trailing separators do not count.
    """
    segments = 0
    path = relative_path
    while True:
        head, tail = os.path.split(path)
        if tail.strip():
            segments += 1
        if head in ("", os.sep):
            break
        head = head.rstrip(os.sep) if head.strip(os.sep) else ""
        if head == path:
            break
        path = head
    return segments


def is_at_depth(relative_path: str, depth: int) -> bool:
    """Return whether ``relative_path`` is exactly ``depth`` segments deep."""
    return path_depth(relative_path) == depth


__all__ = ["path_depth", "is_at_depth"]
