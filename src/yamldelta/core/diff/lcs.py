from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def lcs_pairs(left: Sequence[Any], right: Sequence[Any]) -> list[tuple[int, int]]:
    """Index pairs of a longest common subsequence of ``left`` and ``right``.

    When several alignments are equally long, the one matching the
    earliest equal elements of ``left`` wins.
    """
    m = len(left)
    n = len(right)
    table = [[0 for _ in range(n + 1)] for _ in range(m + 1)]

    for i in range(m - 1, -1, -1):
        for j in range(n - 1, -1, -1):
            if left[i] == right[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    pairs: list[tuple[int, int]] = []
    i = 0
    j = 0
    while i < m and j < n:
        if left[i] == right[j]:
            pairs.append((i, j))
            i += 1
            j += 1
        elif table[i + 1][j] > table[i][j + 1]:
            i += 1
        else:
            # Skipping the right element keeps left[i] available for a match.
            j += 1

    return pairs
