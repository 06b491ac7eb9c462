"""Compile user match/ignore pattern strings into ordered matcher tuples.

Pattern strings are whitespace-separated regular-expression fragments. Each
fragment is compiled once; a malformed fragment fails the whole configuration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import PatternError

MATCH = "match"
IGNORE = "ignore"


@dataclass(frozen=True)
class Matcher:
    """One compiled pattern plus the filter source it came from."""

    kind: str
    pattern: re.Pattern[str]

    @property
    def source(self) -> str:
        return self.pattern.pattern

    def matches(self, relative_path: str) -> bool:
        """Return whether the pattern occurs anywhere in ``relative_path``."""
        return self.pattern.search(relative_path) is not None


def split_fragments(raw: str | None) -> list[str]:
    """Split a pattern string on whitespace runs, dropping empty fragments."""
    if not raw:
        return []
    return raw.split()


def compile_patterns(raw: str | None, kind: str) -> tuple[Matcher, ...]:
    """Compile ``raw`` into matchers, preserving fragment order.

    Raises ``PatternError`` on the first fragment that is not a valid regular
    expression.
    """
    matchers: list[Matcher] = []
    for fragment in split_fragments(raw):
        try:
            compiled = re.compile(fragment)
        except re.error as exc:
            raise PatternError(kind, fragment, str(exc)) from exc
        matchers.append(Matcher(kind=kind, pattern=compiled))
    return tuple(matchers)


def first_match(matchers: tuple[Matcher, ...], relative_path: str) -> Matcher | None:
    """Return the first matcher hitting ``relative_path``, or ``None``."""
    for matcher in matchers:
        if matcher.matches(relative_path):
            return matcher
    return None


__all__ = [
    "MATCH",
    "IGNORE",
    "Matcher",
    "split_fragments",
    "compile_patterns",
    "first_match",
]
