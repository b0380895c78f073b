"""Tests for docdiff.services.reconciler: paired and strict reconciliation."""

from __future__ import annotations

import pytest

from docdiff.models.diff import DiffEntry, DiffKind, TieBreak
from docdiff.services.lcs import compute_lcs
from docdiff.services.reconciler import reconcile, reconcile_strict

U, A, R, M = DiffKind.UNCHANGED, DiffKind.ADDED, DiffKind.REMOVED, DiffKind.MODIFIED


def rows(entries: list[DiffEntry]) -> list[tuple]:
    """Compact view: (kind, original text, modified text, original no, modified no)."""
    return [
        (e.kind, e.original_text, e.modified_text, e.original_line_number, e.modified_line_number)
        for e in entries
    ]


def paired(original: list[str], modified: list[str]) -> list[DiffEntry]:
    return reconcile(original, modified, compute_lcs(original, modified))


class TestReconcile:
    """Rule ordering of the three-pointer walk."""

    def test_identical(self) -> None:
        assert rows(paired(["Bonjour", "Le monde"], ["Bonjour", "Le monde"])) == [
            (U, "Bonjour", "Bonjour", 1, 1),
            (U, "Le monde", "Le monde", 2, 2),
        ]

    def test_trailing_addition(self) -> None:
        assert rows(paired(["A", "B"], ["A", "B", "C"])) == [
            (U, "A", "A", 1, 1),
            (U, "B", "B", 2, 2),
            (A, None, "C", None, 3),
        ]

    def test_middle_removal(self) -> None:
        assert rows(paired(["A", "B", "C"], ["A", "C"])) == [
            (U, "A", "A", 1, 1),
            (R, "B", None, 2, None),
            (U, "C", "C", 3, 2),
        ]

    def test_no_common_line_pairs_as_modified(self) -> None:
        assert rows(paired(["X"], ["Y"])) == [(M, "X", "Y", 1, 1)]

    def test_empty_vs_empty(self) -> None:
        assert paired([], []) == []

    def test_everything_added(self) -> None:
        assert rows(paired([], ["a", "b"])) == [(A, None, "a", None, 1), (A, None, "b", None, 2)]

    def test_everything_removed(self) -> None:
        assert rows(paired(["a", "b"], [])) == [(R, "a", None, 1, None), (R, "b", None, 2, None)]

    def test_addition_before_anchor(self) -> None:
        assert rows(paired(["A", "C"], ["A", "B", "C"])) == [
            (U, "A", "A", 1, 1),
            (A, None, "B", None, 2),
            (U, "C", "C", 2, 3),
        ]

    def test_unrelated_lines_paired_before_anchor(self) -> None:
        # Neither pointer is on the anchor "K", so the two lines are paired
        assert rows(paired(["old", "K"], ["new", "K"])) == [
            (M, "old", "new", 1, 1),
            (U, "K", "K", 2, 2),
        ]

    def test_uneven_unanchored_runs(self) -> None:
        assert rows(paired(["x1", "x2", "K"], ["y1", "K", "y2"])) == [
            (M, "x1", "y1", 1, 1),
            (R, "x2", None, 2, None),
            (U, "K", "K", 3, 2),
            (A, None, "y2", None, 3),
        ]

    def test_swapped_lines_follow_default_tie_break(self) -> None:
        assert rows(paired(["A", "B"], ["B", "A"])) == [
            (R, "A", None, 1, None),
            (U, "B", "B", 2, 1),
            (A, None, "A", None, 2),
        ]

    def test_repeated_lines(self) -> None:
        entries = paired(["a", "a", "b"], ["a", "b", "a"])
        assert [e.kind for e in entries].count(U) == 2

    def test_foreign_lcs_does_not_break_the_walk(self) -> None:
        entries = reconcile(["a"], [], ["a"])
        assert rows(entries) == [(R, "a", None, 1, None)]


class TestReconcileStrict:
    """Textbook backtrack: never pairs unrelated lines."""

    def test_unrelated_lines_become_remove_then_add(self) -> None:
        assert rows(reconcile_strict(["X"], ["Y"])) == [
            (R, "X", None, 1, None),
            (A, None, "Y", None, 1),
        ]

    def test_identical(self) -> None:
        assert [e.kind for e in reconcile_strict(["a", "b"], ["a", "b"])] == [U, U]

    def test_empty(self) -> None:
        assert reconcile_strict([], []) == []

    def test_mixed_edit(self) -> None:
        assert rows(reconcile_strict(["A", "B", "C"], ["A", "X", "C", "D"])) == [
            (U, "A", "A", 1, 1),
            (R, "B", None, 2, None),
            (A, None, "X", None, 2),
            (U, "C", "C", 3, 3),
            (A, None, "D", None, 4),
        ]

    def test_original_tie_break_emits_additions_first(self) -> None:
        assert rows(reconcile_strict(["X"], ["Y"], TieBreak.CONSUME_ORIGINAL)) == [
            (A, None, "Y", None, 1),
            (R, "X", None, 1, None),
        ]


@pytest.mark.parametrize(
    "original, modified",
    [
        (["a", "b", "c"], ["c", "b", "a"]),
        (["p", "q", "p", "q", "r"], ["q", "p", "r", "r", "s"]),
        (["same"] * 3, ["same"] * 5),
        (["1", "2", "3", "4"], ["5", "6"]),
    ],
)
class TestEntryInvariants:
    """Properties that hold for every reconciliation."""

    def test_line_numbers_strictly_increase(self, original: list[str], modified: list[str]) -> None:
        for entries in (paired(original, modified), reconcile_strict(original, modified)):
            orig_nums = [e.original_line_number for e in entries if e.original_line_number]
            mod_nums = [e.modified_line_number for e in entries if e.modified_line_number]
            assert orig_nums == list(range(1, len(original) + 1))
            assert mod_nums == list(range(1, len(modified) + 1))

    def test_each_side_is_reproduced(self, original: list[str], modified: list[str]) -> None:
        for entries in (paired(original, modified), reconcile_strict(original, modified)):
            assert [e.original_text for e in entries if e.original_text is not None] == original
            assert [e.modified_text for e in entries if e.modified_text is not None] == modified

    def test_unchanged_rows_match(self, original: list[str], modified: list[str]) -> None:
        for entry in paired(original, modified):
            if entry.kind == U:
                assert entry.original_text == entry.modified_text
