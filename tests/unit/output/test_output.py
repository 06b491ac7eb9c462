"""Tests for table and JSON rendering of scan results."""

from __future__ import annotations

import json
import unittest
from pathlib import Path

from codetally.classify import CodeFile, LanguageBuckets
from codetally.output import render, render_json, render_table
from codetally.scan import VIEW_MODE_DIRS, VIEW_MODE_FILES, CapturedSubdirectory, ScanReport


def _buckets(*files: CodeFile) -> LanguageBuckets:
    buckets = LanguageBuckets()
    for code_file in files:
        buckets(code_file)
    return buckets


ROOT = Path("/work/repo")
GO_MAIN = CodeFile(ROOT / "cmd" / "main.go", ".go", "Go", "go", 120)
GO_UTIL = CodeFile(ROOT / "pkg" / "util.go", ".go", "Go", "go", 30)
PY_TOOL = CodeFile(ROOT / "tools" / "gen.py", ".py", "Python", "python", 7)


class TableRenderTests(unittest.TestCase):
    def test_files_view_lists_languages_and_total(self) -> None:
        report = ScanReport(roots=[ROOT], dispatched=3)

        text = render_table(report, _buckets(GO_MAIN, PY_TOOL, GO_UTIL), VIEW_MODE_FILES)
        lines = text.splitlines()

        self.assertEqual(lines[0].split(), ["Language", "Lexer", "Files", "Bytes"])
        self.assertEqual(lines[2].split(), ["Go", "go", "2", "150"])
        self.assertEqual(lines[3].split(), ["Python", "python", "1", "7"])
        self.assertEqual(lines[4].split(), ["Total", "3", "157"])

    def test_dirs_view_counts_files_under_each_captured_directory(self) -> None:
        report = ScanReport(
            roots=[ROOT],
            captured=[
                CapturedSubdirectory(ROOT, "cmd"),
                CapturedSubdirectory(ROOT, "pkg"),
                CapturedSubdirectory(ROOT, "docs"),
            ],
        )

        text = render_table(report, _buckets(GO_MAIN, GO_UTIL, PY_TOOL), VIEW_MODE_DIRS)
        rows = [line.split() for line in text.splitlines()[2:]]

        self.assertEqual(rows, [["cmd", "1", "120"], ["pkg", "1", "30"], ["docs", "0", "0"]])

    def test_dirs_view_prefixes_root_labels_with_multiple_roots(self) -> None:
        other = Path("/work/other")
        report = ScanReport(
            roots=[ROOT, other],
            captured=[CapturedSubdirectory(ROOT, "cmd"), CapturedSubdirectory(other, "lib")],
        )

        text = render_table(report, _buckets(GO_MAIN), VIEW_MODE_DIRS)

        self.assertIn("repo/cmd", text)
        self.assertIn("other/lib", text)

    def test_dirs_view_extends_root_labels_until_roots_differ(self) -> None:
        first = Path("/work/alpha/src")
        second = Path("/work/beta/src")
        report = ScanReport(
            roots=[first, second],
            captured=[CapturedSubdirectory(first, "cmd"), CapturedSubdirectory(second, "cmd")],
        )

        text = render_table(report, _buckets(), VIEW_MODE_DIRS)
        labels = [line.split()[0] for line in text.splitlines()[2:]]

        self.assertEqual(labels, ["alpha/src/cmd", "beta/src/cmd"])


class JsonRenderTests(unittest.TestCase):
    def test_json_lists_files_per_language(self) -> None:
        report = ScanReport(roots=[ROOT], dispatched=2)

        payload = json.loads(render_json(report, _buckets(GO_MAIN, PY_TOOL), VIEW_MODE_FILES))

        self.assertEqual(payload["roots"], [str(ROOT)])
        self.assertEqual(payload["languages"][0]["language"], "Go")
        self.assertEqual(payload["languages"][0]["files"], [str(GO_MAIN.path)])
        self.assertEqual(payload["languages"][1]["lexer"], "python")
        self.assertEqual(payload["errors"], [])
        self.assertNotIn("directories", payload)

    def test_json_includes_directories_in_dirs_view(self) -> None:
        report = ScanReport(roots=[ROOT], captured=[CapturedSubdirectory(ROOT, "cmd")])

        payload = json.loads(render("json", report, _buckets(), VIEW_MODE_DIRS))

        self.assertEqual(payload["directories"], [{"root": str(ROOT), "path": "cmd"}])

    def test_unknown_format_falls_back_to_table(self) -> None:
        report = ScanReport(roots=[ROOT])

        self.assertTrue(render("xml", report, _buckets(), VIEW_MODE_FILES).startswith("Language"))


if __name__ == "__main__":
    unittest.main()
