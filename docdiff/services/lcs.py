"""
LCS Computer - Longest common subsequence of two line sequences
"""

from __future__ import annotations

from typing import Sequence

from docdiff.models.diff import TieBreak


def build_lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """
    Build the (m+1) x (n+1) DP table where table[i][j] is the LCS length
    of a[:i] and b[:j]. Lines are compared with exact string equality.
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        line = a[i - 1]
        for j in range(1, n + 1):
            if line == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    return dp


def compute_lcs(
    a: Sequence[str],
    b: Sequence[str],
    tie_break: TieBreak = TieBreak.CONSUME_MODIFIED,
) -> list[str]:
    """
    Return one longest common subsequence of a (original) and b (modified).

    When lines repeat there may be several LCS of equal length; the
    tie_break policy picks which one by deciding where the backtrack
    steps when dp[i-1][j] == dp[i][j-1]. CONSUME_MODIFIED is the default
    used by the paired diff.
    """
    dp = build_lcs_table(a, b)
    prefer_original = tie_break == TieBreak.CONSUME_ORIGINAL

    lcs: list[str] = []
    i, j = len(a), len(b)

    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            lcs.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        elif dp[i - 1][j] == dp[i][j - 1] and prefer_original:
            i -= 1
        else:
            j -= 1

    lcs.reverse()
    return lcs
