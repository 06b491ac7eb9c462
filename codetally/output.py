"""Render scan results as a plain-text table or a JSON document."""

from __future__ import annotations

import json
from pathlib import Path

from .classify import CodeFile, LanguageBuckets
from .config import OUTPUT_FORMAT_JSON
from .scan.types import VIEW_MODE_DIRS, CapturedSubdirectory, ScanReport


def _format_rows(header: tuple[str, ...], rows: list[tuple[str, ...]]) -> str:
    """Left-align text columns and right-align numeric ones."""
    widths = [len(cell) for cell in header]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def render(row: tuple[str, ...]) -> str:
        cells: list[str] = []
        for idx, cell in enumerate(row):
            if cell.isdigit():
                cells.append(cell.rjust(widths[idx]))
            else:
                cells.append(cell.ljust(widths[idx]))
        return "  ".join(cells).rstrip()

    lines = [render(header), "  ".join("-" * width for width in widths)]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines) + "\n"


def _files_under(directory: Path, files: list[CodeFile]) -> list[CodeFile]:
    return [code_file for code_file in files if code_file.path.is_relative_to(directory)]


def _root_labels(roots: list[Path]) -> dict[Path, str]:
    """Label each root by the shortest trailing path no other root ends with."""
    labels: dict[Path, str] = {}
    for root in roots:
        parts = root.parts[1:]
        label = str(root)
        for size in range(1, len(parts) + 1):
            tail = parts[-size:]
            if all(other.parts[1:][-size:] != tail for other in roots if other != root):
                label = "/".join(tail)
                break
        labels[root] = label
    return labels


def _directory_label(captured: CapturedSubdirectory, labels: dict[Path, str], multi_root: bool) -> str:
    relative = captured.relative.replace("\\", "/")
    if not multi_root:
        return relative
    return f"{labels[captured.root]}/{relative}"


def render_table(report: ScanReport, buckets: LanguageBuckets, view_mode: str) -> str:
    """Render dispatched files per language, or per captured subdirectory."""
    if view_mode == VIEW_MODE_DIRS:
        files = list(buckets)
        unique_roots = list(dict.fromkeys(report.roots))
        labels = _root_labels(unique_roots)
        rows = []
        for captured in report.captured:
            under = _files_under(captured.path, files)
            rows.append(
                (
                    _directory_label(captured, labels, len(unique_roots) > 1),
                    str(len(under)),
                    str(sum(code_file.size_bytes for code_file in under)),
                )
            )
        return _format_rows(("Directory", "Files", "Bytes"), rows)

    rows = []
    for language in buckets.languages():
        files = buckets.files_for(language)
        rows.append(
            (
                language,
                files[0].lexer_alias or "-",
                str(len(files)),
                str(sum(code_file.size_bytes for code_file in files)),
            )
        )
    total_bytes = sum(code_file.size_bytes for code_file in buckets)
    rows.append(("Total", "", str(len(buckets)), str(total_bytes)))
    return _format_rows(("Language", "Lexer", "Files", "Bytes"), rows)


def render_json(report: ScanReport, buckets: LanguageBuckets, view_mode: str) -> str:
    """Render the report as a pretty-printed JSON document."""
    payload: dict[str, object] = {
        "roots": [str(root) for root in report.roots],
        "view_mode": view_mode,
        "languages": [
            {
                "language": language,
                "lexer": files[0].lexer_alias,
                "files": [str(code_file.path) for code_file in files],
            }
            for language in buckets.languages()
            for files in (buckets.files_for(language),)
        ],
        "errors": [str(error) for error in report.errors],
    }
    if view_mode == VIEW_MODE_DIRS:
        payload["directories"] = [
            {"root": str(captured.root), "path": captured.relative} for captured in report.captured
        ]
    return json.dumps(payload, indent=2) + "\n"


def render(output_format: str, report: ScanReport, buckets: LanguageBuckets, view_mode: str) -> str:
    """Dispatch to the renderer for ``output_format`` (table by default)."""
    if output_format == OUTPUT_FORMAT_JSON:
        return render_json(report, buckets, view_mode)
    return render_table(report, buckets, view_mode)


__all__ = ["render", "render_table", "render_json"]
