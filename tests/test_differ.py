# tests/test_differ.py
"""
Tests for gitnot.checkpoint.differ module.
"""

from pathlib import Path

from gitnot.checkpoint.differ import (
    NO_NEWLINE_MARKER,
    diff_files,
    read_text_best_effort,
    unified_diff,
)


class TestUnifiedDiff:
    def test_identical_text_is_empty(self):
        assert unified_diff("a\nb\n", "a\nb\n") == ""

    def test_single_line_change(self):
        diff = unified_diff("x\n", "y\n")

        lines = diff.splitlines()
        assert lines[0] == "--- before"
        assert lines[1] == "+++ after"
        assert lines[2].startswith("@@ -1")
        assert "-x" in lines
        assert "+y" in lines

    def test_three_lines_of_context(self):
        old = "".join(f"line{i}\n" for i in range(1, 21))
        new = old.replace("line10\n", "changed\n")

        diff = unified_diff(old, new)

        assert "@@ -7,7 +7,7 @@" in diff
        assert " line6" not in diff
        assert " line7" in diff
        assert " line13" in diff
        assert " line14" not in diff

    def test_missing_trailing_newline_gets_marker(self):
        diff = unified_diff("a\nb", "a\nc")

        lines = diff.splitlines()
        assert lines.count(NO_NEWLINE_MARKER) == 2
        assert lines[lines.index("-b") + 1] == NO_NEWLINE_MARKER
        assert lines[lines.index("+c") + 1] == NO_NEWLINE_MARKER

    def test_every_line_ends_with_newline(self):
        diff = unified_diff("a", "b")

        assert diff.endswith("\n")

    def test_empty_old_side_is_all_additions(self):
        diff = unified_diff("", "one\ntwo\n")

        assert "+one" in diff.splitlines()
        assert "+two" in diff.splitlines()


class TestBestEffortReads:
    def test_missing_file_reads_as_empty(self, tmp_path: Path):
        assert read_text_best_effort(tmp_path / "missing.txt") == ""

    def test_invalid_utf8_is_replaced(self, tmp_path: Path):
        f = tmp_path / "bin.txt"
        f.write_bytes(b"ok\xff\n")

        assert read_text_best_effort(f) == "ok�\n"

    def test_diff_against_missing_file(self, tmp_path: Path):
        new = tmp_path / "new.txt"
        new.write_text("hello\n", encoding="utf-8")

        diff = diff_files(tmp_path / "missing.txt", new)

        assert "+hello" in diff.splitlines()
