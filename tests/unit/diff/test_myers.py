"""Unit and property tests for the Myers shortest edit script search."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import apply_edit_script, lcs_length

from textdiff.diff.models import EditKind, EditOp
from textdiff.diff.myers import edit_distance, shortest_edit_script

small_lists = st.lists(st.sampled_from("abcd"), max_size=12)


def _kinds(script):
    return [op.kind.value for op in script]


@pytest.mark.unit
class TestShortestEditScript:
    """Tests for shortest_edit_script()."""

    def test_both_empty(self):
        """Two empty sequences need no operations."""
        assert shortest_edit_script([], []) == []

    def test_empty_original(self):
        """Everything is inserted when A is empty."""
        script = shortest_edit_script([], ["x", "y"])
        assert script == [EditOp(EditKind.ADDED, None, 0), EditOp(EditKind.ADDED, None, 1)]

    def test_empty_target(self):
        """Everything is deleted when B is empty."""
        script = shortest_edit_script(["x", "y"], [])
        assert script == [EditOp(EditKind.REMOVED, 0, None), EditOp(EditKind.REMOVED, 1, None)]

    def test_identical_sequences(self):
        """Identical input yields only equal operations."""
        script = shortest_edit_script(["a", "b", "c"], ["a", "b", "c"])
        assert _kinds(script) == ["equal", "equal", "equal"]
        assert [(op.index_a, op.index_b) for op in script] == [(0, 0), (1, 1), (2, 2)]

    def test_substitution_orders_delete_before_insert(self):
        """A replaced element is reported as removal followed by addition."""
        assert _kinds(shortest_edit_script("abc", "abd")) == ["equal", "equal", "removed", "added"]

    def test_single_insertion(self):
        """An inserted middle element sits between equal runs."""
        script = shortest_edit_script(["a", "c"], ["a", "b", "c"])
        assert script == [
            EditOp(EditKind.EQUAL, 0, 0),
            EditOp(EditKind.ADDED, None, 1),
            EditOp(EditKind.EQUAL, 1, 2),
        ]

    def test_single_deletion(self):
        """A deleted middle element sits between equal runs."""
        script = shortest_edit_script(["a", "b", "c"], ["a", "c"])
        assert script == [
            EditOp(EditKind.EQUAL, 0, 0),
            EditOp(EditKind.REMOVED, 1, None),
            EditOp(EditKind.EQUAL, 1, 1),
        ]

    def test_classic_example_distance(self):
        """The ABCABBA / CBABAC example has distance 5."""
        script = shortest_edit_script("ABCABBA", "CBABAC")
        assert sum(1 for op in script if op.kind is not EditKind.EQUAL) == 5
        assert edit_distance("ABCABBA", "CBABAC") == 5

    def test_custom_equality(self):
        """A custom predicate decides which elements match."""
        script = shortest_edit_script(["Foo", "BAR"], ["foo", "bar"], equals=lambda a, b: a.lower() == b.lower())
        assert _kinds(script) == ["equal", "equal"]

    def test_deterministic(self):
        """The same input always produces the same script."""
        first = shortest_edit_script("kitten", "sitting")
        second = shortest_edit_script("kitten", "sitting")
        assert first == second

    def test_long_dissimilar_sequences(self):
        """Completely different sequences are handled without recursion limits."""
        seq_a = [f"a{i}" for i in range(400)]
        seq_b = [f"b{i}" for i in range(400)]
        script = shortest_edit_script(seq_a, seq_b)
        assert len(script) == 800
        assert edit_distance(seq_a, seq_b) == 800


@pytest.mark.unit
class TestEditScriptProperties:
    """Property-based tests for optimality and reconstruction."""

    @given(small_lists, small_lists)
    def test_distance_is_minimal(self, seq_a, seq_b):
        """Property: the number of edits equals len(A) + len(B) - 2 * LCS."""
        script = shortest_edit_script(seq_a, seq_b)
        edits = sum(1 for op in script if op.kind is not EditKind.EQUAL)
        assert edits == len(seq_a) + len(seq_b) - 2 * lcs_length(seq_a, seq_b)

    @given(small_lists, small_lists)
    def test_script_reconstructs_both_sides(self, seq_a, seq_b):
        """Property: equal+removed rebuild A and equal+added rebuild B."""
        script = shortest_edit_script(seq_a, seq_b)
        rebuilt_a, rebuilt_b = apply_edit_script(script, seq_a, seq_b)
        assert rebuilt_a == seq_a
        assert rebuilt_b == seq_b

    @given(small_lists, small_lists)
    def test_indices_are_monotonic(self, seq_a, seq_b):
        """Property: indices on each side appear in increasing order."""
        script = shortest_edit_script(seq_a, seq_b)
        indices_a = [op.index_a for op in script if op.index_a is not None]
        indices_b = [op.index_b for op in script if op.index_b is not None]
        assert indices_a == list(range(len(seq_a)))
        assert indices_b == list(range(len(seq_b)))

    @given(small_lists)
    def test_identity_has_no_edits(self, seq):
        """Property: a sequence diffed against itself is all equal."""
        assert all(op.kind is EditKind.EQUAL for op in shortest_edit_script(seq, list(seq)))
