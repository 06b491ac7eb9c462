"""Per-entry decision tests for the traversal engine.

Exercises ``evaluate_file``/``evaluate_directory`` directly so each step of
the precedence chain can be checked in isolation.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from codetally.scan import (
    VIEW_MODE_DIRS,
    DirEntryDecision,
    ScanOptions,
    ScanSession,
    evaluate_directory,
    evaluate_file,
    is_vcs_dir,
)


class DirectoryDecisionTests(unittest.TestCase):
    def test_vcs_directories_are_pruned(self) -> None:
        session = ScanSession()
        root = Path("/tmp/project")
        for name in (".git", ".svn", ".hg", ".bzr", ".cvs"):
            self.assertTrue(is_vcs_dir(name))
            self.assertIs(evaluate_directory(session, root, name), DirEntryDecision.PRUNE_SUBTREE)
            self.assertIs(evaluate_directory(session, root, f"pkg/{name}"), DirEntryDecision.PRUNE_SUBTREE)
        self.assertFalse(is_vcs_dir(".github"))

    def test_plain_directory_descends(self) -> None:
        session = ScanSession()

        self.assertIs(evaluate_directory(session, Path("/tmp/project"), "src"), DirEntryDecision.DESCEND)

    def test_ignore_file_prunes_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".gitignore").write_text("build/\n", encoding="utf-8")
            session = ScanSession(ScanOptions(match=r"\.go$"))
            session.ignore_files.load(root)

            self.assertIs(evaluate_directory(session, root, "build"), DirEntryDecision.PRUNE_SUBTREE)
            self.assertIs(evaluate_directory(session, root, "src"), DirEntryDecision.DESCEND)

    def test_dirs_mode_captures_only_configured_depth(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(ScanOptions(view_mode=VIEW_MODE_DIRS))

        evaluate_directory(session, root, "a")
        evaluate_directory(session, root, "a/b")
        evaluate_directory(session, root, ".git")

        self.assertEqual([captured.relative for captured in session.captured], ["a"])

    def test_files_mode_captures_nothing(self) -> None:
        session = ScanSession()

        evaluate_directory(session, Path("/tmp/project"), "a")

        self.assertEqual(session.captured, [])


class FileDecisionTests(unittest.TestCase):
    def _decide(self, session: ScanSession, root: Path, relative: str) -> DirEntryDecision:
        return evaluate_file(session, root, root / relative, relative)

    def test_match_patterns_restrict_candidates(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(ScanOptions(match=r"^cmd/"))

        self.assertIs(self._decide(session, root, "cmd/main.go"), DirEntryDecision.ACCEPT)
        self.assertIs(self._decide(session, root, "pkg/util.go"), DirEntryDecision.REJECT)

    def test_ignore_patterns_override_match_patterns(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(ScanOptions(match=r"\.go$", ignore=r"_test\.go$"))

        self.assertIs(self._decide(session, root, "a.go"), DirEntryDecision.ACCEPT)
        self.assertIs(self._decide(session, root, "a_test.go"), DirEntryDecision.REJECT)
        self.assertIs(self._decide(session, root, "a.py"), DirEntryDecision.REJECT)

    def test_match_pattern_hit_bypasses_ignore_file_for_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".gitignore").write_text("*.gen.go\n", encoding="utf-8")

            plain = ScanSession()
            plain.ignore_files.load(root)
            matched = ScanSession(ScanOptions(match=r"\.gen\.go$"))
            matched.ignore_files.load(root)

            self.assertIs(self._decide(plain, root, "api.gen.go"), DirEntryDecision.REJECT)
            self.assertIs(self._decide(matched, root, "api.gen.go"), DirEntryDecision.ACCEPT)

    def test_unsupported_extension_rejected_even_when_matched(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(ScanOptions(match=".*"))

        self.assertIs(self._decide(session, root, "notes.txt"), DirEntryDecision.REJECT)
        self.assertIs(self._decide(session, root, "Makefile"), DirEntryDecision.REJECT)

    def test_custom_registry_controls_supported_extensions(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(registry={".txt": "Text"})

        self.assertIs(self._decide(session, root, "notes.txt"), DirEntryDecision.ACCEPT)
        self.assertIs(self._decide(session, root, "main.go"), DirEntryDecision.REJECT)

    def test_debug_logs_patterns_tried_before_first_hit(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession(ScanOptions(match=r"^pkg/ ^cmd/ \.go$", ignore=r"main _test", debug=True))

        with self.assertLogs("codetally.scan.walk", level="DEBUG") as logs:
            self.assertIs(self._decide(session, root, "cmd/main.go"), DirEntryDecision.REJECT)

        messages = [record.getMessage() for record in logs.records]
        self.assertEqual(
            [message for message in messages if message.startswith("Not matched")],
            [f"Not matched: {root / 'cmd/main.go'} with regexp: ^pkg/"],
        )
        self.assertIn(f"File ignored: {root / 'cmd/main.go'} with regexp: main", messages)

    def test_seen_paths_are_rejected(self) -> None:
        root = Path("/tmp/project")
        session = ScanSession()
        session.seen.add(root / "main.go")

        self.assertIs(self._decide(session, root, "main.go"), DirEntryDecision.REJECT)


if __name__ == "__main__":
    unittest.main()
