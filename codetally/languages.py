"""Supported source-language registry keyed by file extension.

The scan engine only dispatches files whose extension appears here. Pygments
supplies the lexer alias a downstream line counter would tokenize with.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pygments.lexers import find_lexer_class_for_filename

SUPPORTED_LANGUAGES: dict[str, str] = {
    ".go": "Go",
    ".py": "Python",
    ".pyi": "Python",
    ".js": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".jsx": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".rs": "Rust",
    ".c": "C",
    ".h": "C",
    ".cc": "C++",
    ".cpp": "C++",
    ".cxx": "C++",
    ".hpp": "C++",
    ".hh": "C++",
    ".cs": "C#",
    ".java": "Java",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".scala": "Scala",
    ".swift": "Swift",
    ".m": "Objective-C",
    ".rb": "Ruby",
    ".php": "PHP",
    ".pl": "Perl",
    ".lua": "Lua",
    ".dart": "Dart",
    ".ex": "Elixir",
    ".exs": "Elixir",
    ".erl": "Erlang",
    ".hs": "Haskell",
    ".clj": "Clojure",
    ".zig": "Zig",
    ".sh": "Shell",
    ".bash": "Shell",
    ".zsh": "Shell",
    ".sql": "SQL",
    ".html": "HTML",
    ".css": "CSS",
    ".scss": "SCSS",
    ".vue": "Vue",
    ".svelte": "Svelte",
    ".md": "Markdown",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".toml": "TOML",
    ".json": "JSON",
    ".xml": "XML",
    ".proto": "Protocol Buffers",
}


def file_extension(path: Path | str) -> str:
    """Return the final suffix of ``path`` (``""`` for dotfiles and bare names)."""
    return Path(path).suffix


def is_supported_extension(extension: str, registry: dict[str, str] | None = None) -> bool:
    """Return whether ``extension`` names a supported source language."""
    table = SUPPORTED_LANGUAGES if registry is None else registry
    return extension in table


def language_for_extension(extension: str, registry: dict[str, str] | None = None) -> str | None:
    """Return the language bucket name for ``extension`` or ``None``."""
    table = SUPPORTED_LANGUAGES if registry is None else registry
    return table.get(extension)


@lru_cache(maxsize=256)
def lexer_alias_for_extension(extension: str) -> str | None:
    """Return the primary Pygments lexer alias for ``extension``.

    Resolution is filename-glob based only, so no file content is read.
    """
    if not extension:
        return None
    lexer_cls = find_lexer_class_for_filename(f"file{extension}")
    if lexer_cls is None or not lexer_cls.aliases:
        return None
    return lexer_cls.aliases[0]


__all__ = [
    "SUPPORTED_LANGUAGES",
    "file_extension",
    "is_supported_extension",
    "language_for_extension",
    "lexer_alias_for_extension",
]
