"""Longest-common-subsequence table and edit script reconstruction over lines"""

from linediff.core.models import ChangeKind, DiffOperation


def build_lcs(lines_a: list[str], lines_b: list[str]) -> list[list[int]]:
    """Return the (m+1) x (n+1) LCS length table for two normalized line lists.

    table[i][j] is the LCS length of lines_a[:i] and lines_b[:j]; row 0 and
    column 0 are zero. O(m*n) in both time and memory.
    """
    m, n = len(lines_a), len(lines_b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        a = lines_a[i - 1]
        prev, row = table[i - 1], table[i]
        for j in range(1, n + 1):
            if a == lines_b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    return table


def reconstruct(
    original_a: list[str],
    original_b: list[str],
    normalized_a: list[str],
    normalized_b: list[str],
    lcs: list[list[int]],
    ) -> list[DiffOperation]:
    """Backtrack through lcs from the bottom-right corner into document-ordered operations.

    On ties an addition is taken before a removal while walking backwards,
    so removals precede additions in each changed region of the result.
    """
    ops: list[DiffOperation] = []
    i, j = len(original_a), len(original_b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and normalized_a[i - 1] == normalized_b[j - 1]:
            ops.append(DiffOperation(
                kind=ChangeKind.unchanged, left_line_number=i, right_line_number=j,
                content=original_a[i - 1],
            ))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or lcs[i][j - 1] >= lcs[i - 1][j]):
            ops.append(DiffOperation(kind=ChangeKind.added, right_line_number=j, content=original_b[j - 1]))
            j -= 1
        else:
            ops.append(DiffOperation(kind=ChangeKind.removed, left_line_number=i, content=original_a[i - 1]))
            i -= 1

    ops.reverse()
    return ops
