"""Exception types raised by the scan engine.

Configuration problems surface before any directory is read. Traversal
problems carry the root whose walk was aborted.
"""

from __future__ import annotations

from pathlib import Path


class CodetallyError(Exception):
    """Base class for all codetally errors."""


class ConfigurationError(CodetallyError):
    """Invalid scan configuration detected before traversal starts."""


class PatternError(ConfigurationError):
    """A match/ignore fragment is not a valid regular expression."""

    def __init__(self, kind: str, fragment: str, reason: str) -> None:
        super().__init__(f"invalid {kind} pattern {fragment!r}: {reason}")
        self.kind = kind
        self.fragment = fragment
        self.reason = reason


class TraversalError(CodetallyError):
    """Reading a directory or one of its entries failed; the root's walk was aborted."""

    def __init__(self, root: Path, path: Path, error: OSError) -> None:
        detail = error.strerror or str(error)
        super().__init__(f"cannot read {path}: {detail}")
        self.root = root
        self.path = path
        self.error = error


__all__ = [
    "CodetallyError",
    "ConfigurationError",
    "PatternError",
    "TraversalError",
]
