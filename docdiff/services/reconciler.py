"""
Diff Reconciler - Walk two line sequences against their LCS and classify each row
"""

from __future__ import annotations

from typing import Sequence

from docdiff.models.diff import DiffEntry, DiffKind, TieBreak
from docdiff.services.lcs import build_lcs_table


def _unchanged(original: str, modified: str, orig_num: int, mod_num: int) -> DiffEntry:
    return DiffEntry(
        kind=DiffKind.UNCHANGED,
        original_text=original,
        modified_text=modified,
        original_line_number=orig_num,
        modified_line_number=mod_num,
    )


def _modified(original: str, modified: str, orig_num: int, mod_num: int) -> DiffEntry:
    return DiffEntry(
        kind=DiffKind.MODIFIED,
        original_text=original,
        modified_text=modified,
        original_line_number=orig_num,
        modified_line_number=mod_num,
    )


def _added(modified: str, mod_num: int) -> DiffEntry:
    return DiffEntry(kind=DiffKind.ADDED, modified_text=modified, modified_line_number=mod_num)


def _removed(original: str, orig_num: int) -> DiffEntry:
    return DiffEntry(kind=DiffKind.REMOVED, original_text=original, original_line_number=orig_num)


def reconcile(
    original: Sequence[str],
    modified: Sequence[str],
    lcs: Sequence[str],
) -> list[DiffEntry]:
    """
    Produce diff entries by walking original, modified and lcs in lock-step.

    Rules, in priority order, on every iteration:
        1. original sits on the next LCS line:
           a. modified does too -> Unchanged
           b. otherwise -> Added (modified catches up to the anchor)
        2. modified sits on the next LCS line -> Removed
        3. both sides have lines left -> Modified (pairs the two lines
           even if they are unrelated)
        4. only original has lines left -> Removed
        5. only modified has lines left -> Added

    Each rule advances at least one side, so the walk always terminates.
    """
    entries: list[DiffEntry] = []
    orig_len, mod_len, lcs_len = len(original), len(modified), len(lcs)
    orig_idx = mod_idx = lcs_idx = 0
    orig_num = mod_num = 1

    while orig_idx < orig_len or mod_idx < mod_len:
        anchor = lcs[lcs_idx] if lcs_idx < lcs_len else None
        orig_on_anchor = anchor is not None and orig_idx < orig_len and original[orig_idx] == anchor
        mod_on_anchor = anchor is not None and mod_idx < mod_len and modified[mod_idx] == anchor

        if orig_on_anchor and mod_on_anchor:
            entries.append(_unchanged(original[orig_idx], modified[mod_idx], orig_num, mod_num))
            orig_idx += 1
            mod_idx += 1
            lcs_idx += 1
            orig_num += 1
            mod_num += 1
        elif orig_on_anchor and mod_idx < mod_len:
            entries.append(_added(modified[mod_idx], mod_num))
            mod_idx += 1
            mod_num += 1
        elif mod_on_anchor and orig_idx < orig_len:
            entries.append(_removed(original[orig_idx], orig_num))
            orig_idx += 1
            orig_num += 1
        elif orig_idx < orig_len and mod_idx < mod_len:
            entries.append(_modified(original[orig_idx], modified[mod_idx], orig_num, mod_num))
            orig_idx += 1
            mod_idx += 1
            orig_num += 1
            mod_num += 1
        elif orig_idx < orig_len:
            entries.append(_removed(original[orig_idx], orig_num))
            orig_idx += 1
            orig_num += 1
        else:
            entries.append(_added(modified[mod_idx], mod_num))
            mod_idx += 1
            mod_num += 1

    return entries


def reconcile_strict(
    original: Sequence[str],
    modified: Sequence[str],
    tie_break: TieBreak = TieBreak.CONSUME_MODIFIED,
) -> list[DiffEntry]:
    """
    Textbook LCS diff: backtrack the DP table emitting only Unchanged,
    Added and Removed rows. Unrelated lines are never paired.

    On a tie the backtrack emits the modified line first (CONSUME_MODIFIED),
    which after reversal places removals before additions.
    """
    dp = build_lcs_table(original, modified)
    prefer_modified = tie_break == TieBreak.CONSUME_MODIFIED

    # (kind, original index, modified index), collected backwards
    steps: list[tuple[DiffKind, int, int]] = []
    i, j = len(original), len(modified)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == modified[j - 1]:
            steps.append((DiffKind.UNCHANGED, i - 1, j - 1))
            i -= 1
            j -= 1
        elif j > 0 and (
            i == 0
            or dp[i][j - 1] > dp[i - 1][j]
            or (prefer_modified and dp[i][j - 1] == dp[i - 1][j])
        ):
            steps.append((DiffKind.ADDED, -1, j - 1))
            j -= 1
        else:
            steps.append((DiffKind.REMOVED, i - 1, -1))
            i -= 1

    steps.reverse()

    entries: list[DiffEntry] = []
    orig_num = mod_num = 1
    for kind, oi, mi in steps:
        if kind == DiffKind.UNCHANGED:
            entries.append(_unchanged(original[oi], modified[mi], orig_num, mod_num))
            orig_num += 1
            mod_num += 1
        elif kind == DiffKind.ADDED:
            entries.append(_added(modified[mi], mod_num))
            mod_num += 1
        else:
            entries.append(_removed(original[oi], orig_num))
            orig_num += 1

    return entries
