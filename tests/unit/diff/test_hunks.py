"""Unit tests for hunk grouping and line-number mapping."""

import pytest

from textdiff.diff.hunks import annotate_entries, group_into_hunks, map_line_numbers
from textdiff.diff.models import DiffEntry, DiffKind, Hunk
from textdiff.diff.text_diff import compute_diff_result


def equal(n):
    return DiffEntry(DiffKind.EQUAL, text_a=f"e{n}", text_b=f"e{n}", line_num_a=n, line_num_b=n)


def added(n):
    return DiffEntry(DiffKind.ADDED, text_b=f"+{n}", line_num_b=n)


def removed(n):
    return DiffEntry(DiffKind.REMOVED, text_a=f"-{n}", line_num_a=n)


@pytest.mark.unit
class TestGroupIntoHunks:
    """Tests for group_into_hunks()."""

    def test_no_changes_no_hunks(self):
        """A script of equal entries produces no hunks."""
        assert group_into_hunks([equal(i) for i in range(1, 10)]) == []

    def test_empty_script(self):
        """An empty script produces no hunks."""
        assert group_into_hunks([]) == []

    def test_context_is_bounded(self):
        """Only the last three equal entries before a change are kept."""
        entries = [equal(i) for i in range(1, 8)] + [removed(8)] + [equal(i) for i in range(9, 12)]
        [hunk] = group_into_hunks(entries)
        assert [e.line_num_a for e in hunk.context_before] == [5, 6, 7]
        assert [e.kind for e in hunk.changes] == [DiffKind.REMOVED]
        assert [e.line_num_a for e in hunk.context_after] == [9, 10, 11]

    def test_short_gap_merges(self):
        """Changes separated by at most six equal entries share a hunk."""
        entries = [removed(1)] + [equal(i) for i in range(2, 8)] + [removed(8)]
        [hunk] = group_into_hunks(entries)
        assert len(hunk.changes) == 8
        assert hunk.context_after == ()

    def test_long_gap_splits(self):
        """Seven equal entries between changes split the hunks."""
        entries = [removed(1)] + [equal(i) for i in range(2, 9)] + [removed(9)]
        first, second = group_into_hunks(entries)
        assert [e.kind for e in first.changes] == [DiffKind.REMOVED]
        assert [e.line_num_a for e in first.context_after] == [2, 3, 4]
        # Leftover equal entries seed the next hunk's before-context
        assert [e.line_num_a for e in second.context_before] == [6, 7, 8]
        assert [e.kind for e in second.changes] == [DiffKind.REMOVED]

    def test_split_does_not_duplicate_or_drop_entries(self):
        """Every entry of a long gap appears at most once across hunks."""
        entries = [removed(1)] + [equal(i) for i in range(2, 10)] + [added(10)]
        hunks = group_into_hunks(entries, context_size=3, merge_distance=6)
        seen = [id(entry) for hunk in hunks for entry in hunk]
        assert len(seen) == len(set(seen))
        after = [e.line_num_a for e in hunks[0].context_after]
        before = [e.line_num_a for e in hunks[1].context_before]
        assert after == [2, 3, 4]
        assert before == [7, 8, 9]

    def test_trailing_equals_capped_at_end(self):
        """Equal entries after the last change are capped to the context size."""
        entries = [added(1)] + [equal(i) for i in range(2, 7)]
        [hunk] = group_into_hunks(entries)
        assert len(hunk.context_after) == 3
        assert [e.kind for e in hunk.changes] == [DiffKind.ADDED]

    def test_zero_context(self):
        """A context size of zero keeps only the changes."""
        entries = [equal(1), removed(2), equal(3)]
        [hunk] = group_into_hunks(entries, context_size=0)
        assert hunk.context_before == ()
        assert hunk.context_after == ()

    def test_every_hunk_has_a_change(self, long_document):
        """Hunks always hold at least one change and bounded context."""
        lines_b = list(long_document)
        lines_b[10] = "changed ten"
        lines_b[60] = "changed sixty"
        result = compute_diff_result("\n".join(long_document), "\n".join(lines_b))
        assert len(result.hunks) == 2
        for hunk in result.hunks:
            assert any(entry.is_change for entry in hunk.changes)
            assert len(hunk.context_before) <= 3
            assert len(hunk.context_after) <= 3


@pytest.mark.unit
class TestLineNumberMapping:
    """Tests for annotate_entries() and map_line_numbers()."""

    def test_annotate_maps_through_line_map(self):
        """Filtered positions translate to original line numbers."""
        entries = [equal(1), removed(2)]
        annotated = annotate_entries(entries, line_map_a=[1, 3], line_map_b=[2])
        assert annotated[0].original_line_num_a == 1
        assert annotated[0].original_line_num_b == 2
        assert annotated[1].original_line_num_a == 3
        assert annotated[1].original_line_num_b is None

    def test_map_line_numbers_keeps_structure(self):
        """Mapped hunks keep their before/changes/after partition."""
        hunk = Hunk(context_before=(equal(1),), changes=(removed(2),), context_after=(equal(3),))
        [mapped] = map_line_numbers([hunk], line_map_a=[10, 20, 30], line_map_b=[10, 20, 30])
        assert [e.original_line_num_a for e in mapped] == [10, 20, 30]
        assert mapped.header() == "@@ -10,3 +10,2 @@"


@pytest.mark.unit
class TestHunkHeader:
    """Tests for Hunk spans and headers."""

    def test_insert_only_hunk_has_zero_span_on_a(self):
        """A side with no lines reports 0,0."""
        hunk = Hunk(context_before=(), changes=(added(1).with_original_line_numbers(None, 1),), context_after=())
        assert hunk.span_a() == (0, 0)
        assert hunk.span_b() == (1, 1)
        assert hunk.header() == "@@ -0,0 +1,1 @@"
