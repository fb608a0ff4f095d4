"""Unit tests for the unified diff renderer."""

import pytest

from textdiff.diff.renderers.unified import (
    BOLD,
    CYAN,
    GREEN,
    NO_REVERSE,
    RED,
    RESET,
    REVERSE,
    UnifiedDiffRenderer,
    render_to_file,
    visualize_whitespace,
)
from textdiff.diff.text_diff import compute_diff_result
from textdiff.options import DiffOptions


@pytest.fixture
def modified_result():
    return compute_diff_result("line1\nline2\nline3", "line1\nlineTwo\nline3")


@pytest.mark.unit
class TestVisualizeWhitespace:
    """Tests for visualize_whitespace()."""

    def test_spaces_and_tabs(self):
        """Spaces and tabs get visible markers."""
        assert visualize_whitespace("a b\tc") == "a·b→   c"

    def test_disabled(self):
        """Text is unchanged when the option is off."""
        assert visualize_whitespace("a b", show_whitespace=False) == "a b"

    def test_none(self):
        """Missing text renders as empty."""
        assert visualize_whitespace(None) == ""


@pytest.mark.unit
class TestUnifiedDiffRenderer:
    """Tests for UnifiedDiffRenderer."""

    def test_plain_output(self, modified_result):
        """Headers, hunk header and prefixed lines in patch order."""
        lines = list(UnifiedDiffRenderer().render(modified_result, label_a="old.txt", label_b="new.txt"))
        assert lines == [
            "--- old.txt",
            "+++ new.txt",
            "@@ -1,3 +1,3 @@",
            " line1",
            "-line2",
            "+lineTwo",
            " line3",
        ]

    def test_no_changes_renders_nothing(self):
        """Identical documents produce no output."""
        result = compute_diff_result("same", "same")
        assert list(UnifiedDiffRenderer().render(result)) == []

    def test_added_and_removed_lines(self):
        """Unpaired changes use their own side's text."""
        result = compute_diff_result("keep\nold", "keep\nnew\nextra", options=DiffOptions(similarity_threshold=1.0))
        lines = list(UnifiedDiffRenderer().render(result))
        assert "-old" in lines
        assert "+new" in lines
        assert "+extra" in lines
        assert lines[2] == "@@ -1,2 +1,3 @@"

    def test_header_counts_shown_lines_when_blanks_elided(self):
        """Skipped blank lines are not part of the hunk header counts."""
        text_a = "a\n\nb\n\nc"
        text_b = "a\n\nB\n\nc"
        lines = list(UnifiedDiffRenderer().render(compute_diff_result(text_a, text_b)))
        assert lines[2] == "@@ -1,3 +1,3 @@"
        assert lines[3:] == [" a", "-b", "+B", " c"]

    def test_header_matches_source_range_with_empty_lines_kept(self):
        """Keeping blank lines makes the header cover the source range."""
        text_a = "a\n\nb\n\nc"
        text_b = "a\n\nB\n\nc"
        result = compute_diff_result(text_a, text_b, ignore_empty_lines=False)
        lines = list(UnifiedDiffRenderer().render(result))
        assert lines[2] == "@@ -1,5 +1,5 @@"
        assert lines[3:] == [" a", " ", "-b", "+B", " ", " c"]

    def test_colored_output(self, modified_result):
        """Colors wrap headers, hunk headers and changed lines."""
        lines = list(UnifiedDiffRenderer(use_color=True).render(modified_result))
        assert lines[0] == f"{BOLD}--- a{RESET}"
        assert lines[2] == f"{CYAN}@@ -1,3 +1,3 @@{RESET}"
        assert lines[3] == " line1"
        assert lines[4] == f"{RED}-line{REVERSE}2{NO_REVERSE}{RESET}"
        assert lines[5] == f"{GREEN}+line{REVERSE}Two{NO_REVERSE}{RESET}"

    def test_colored_without_highlight(self, modified_result):
        """Highlighting can be turned off independently of colors."""
        lines = list(UnifiedDiffRenderer(use_color=True, highlight_changes=False).render(modified_result))
        assert lines[4] == f"{RED}-line2{RESET}"

    def test_show_whitespace(self):
        """Visible whitespace applies to every rendered line."""
        result = compute_diff_result("a b\nx", "a b\ny")
        lines = list(UnifiedDiffRenderer(show_whitespace=True).render(result))
        assert " a·b" in lines

    def test_render_to_string(self, modified_result):
        """Lines are joined with newlines."""
        text = UnifiedDiffRenderer().render_to_string(modified_result)
        assert text.startswith("--- a\n+++ b\n@@ -1,3 +1,3 @@")


@pytest.mark.unit
class TestRenderToFile:
    """Tests for render_to_file()."""

    def test_file_output_has_no_colors(self, modified_result, temp_dir):
        """Files are always written without ANSI codes."""
        path = temp_dir / "out.diff"
        render_to_file(modified_result, str(path), use_color=True)
        content = path.read_text(encoding="utf-8")
        assert "\033[" not in content
        assert content.endswith("+lineTwo\n line3\n")

    def test_empty_diff_writes_empty_file(self, temp_dir):
        """No changes give an empty file."""
        path = temp_dir / "out.diff"
        render_to_file(compute_diff_result("a", "a"), str(path))
        assert path.read_text(encoding="utf-8") == ""
