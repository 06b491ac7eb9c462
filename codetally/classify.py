"""Code-file handles and the default per-language dispatch sink."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .languages import file_extension, language_for_extension, lexer_alias_for_extension


@dataclass(frozen=True)
class CodeFile:
    """Accepted source file handed to classification."""

    path: Path
    extension: str
    language: str
    lexer_alias: str | None
    size_bytes: int

    @classmethod
    def from_path(cls, path: Path, registry: dict[str, str] | None = None) -> "CodeFile":
        """Stat ``path`` and build a handle for it.

        Raises ``OSError`` when the file cannot be stat'ed or is not a regular
        file, and ``ValueError`` when its extension is not registered.
        """
        extension = file_extension(path)
        language = language_for_extension(extension, registry)
        if language is None:
            raise ValueError(f"unsupported file type: {path}")
        stat = path.stat()
        if not path.is_file():
            raise IsADirectoryError(f"not a regular file: {path}")
        return cls(
            path=path,
            extension=extension,
            language=language,
            lexer_alias=lexer_alias_for_extension(extension),
            size_bytes=int(stat.st_size),
        )


Classifier = Callable[[CodeFile], None]


class LanguageBuckets:
    """Collect dispatched files grouped by language in dispatch order."""

    def __init__(self) -> None:
        self._buckets: dict[str, list[CodeFile]] = {}

    def __call__(self, code_file: CodeFile) -> None:
        self._buckets.setdefault(code_file.language, []).append(code_file)

    def __len__(self) -> int:
        return sum(len(files) for files in self._buckets.values())

    def __iter__(self) -> Iterator[CodeFile]:
        for files in self._buckets.values():
            yield from files

    def languages(self) -> list[str]:
        """Return language names sorted by file count, then name."""
        return sorted(self._buckets, key=lambda name: (-len(self._buckets[name]), name.casefold()))

    def files_for(self, language: str) -> list[CodeFile]:
        return list(self._buckets.get(language, ()))


__all__ = [
    "CodeFile",
    "Classifier",
    "LanguageBuckets",
]
