"""
lcs.py — Longest Common Subsequence
===================================
(m+1) × (n+1) table; row 0 and column 0 are the empty-prefix base cases.

    match    → LCS[i][j] = LCS[i-1][j-1] + 1      dependency: diagonal
    no match → LCS[i][j] = max(top, left)          dependency: the winner,
                                                   top when top >= left

Backtracking follows the recorded dependencies from (m, n).  A diagonal
dependency only exists on a character match, so every diagonal move
contributes one character, and the up / left moves reproduce the forward
tie-break exactly.
"""

from dataclasses import dataclass
from typing import Generator, List

from dptable import DPTable, create_dp_table, update_dp_cell
from algorithms.step import DPAlgorithmStep


PSEUDOCODE: List[str] = [
    "def lcs(a, b):",
    "    L = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]",
    "    for i in range(1, len(a) + 1):",
    "        for j in range(1, len(b) + 1):",
    "            if a[i - 1] == b[j - 1]: L[i][j] = L[i - 1][j - 1] + 1",
    "            else: L[i][j] = max(L[i - 1][j], L[i][j - 1])",
    "    return L[len(a)][len(b)]",
]


@dataclass(frozen=True)
class LCSResult:
    length:      int
    subsequence: str

    def to_dict(self) -> dict:
        return {"length": self.length, "subsequence": self.subsequence}


def lcs(str1: str, str2: str) -> Generator[DPAlgorithmStep, None, None]:
    if not str1 or not str2:
        yield DPAlgorithmStep(
            create_dp_table(1, 1),
            "Empty string provided. LCS length is 0.",
            result=LCSResult(0, ""),
        )
        return

    m, n = len(str1), len(str2)
    table = create_dp_table(m + 1, n + 1)
    table.row_labels = [""] + list(str1)
    table.col_labels = [""] + list(str2)

    yield DPAlgorithmStep(
        table, f'Computing LCS of "{str1}" and "{str2}". Table size: {m + 1} x {n + 1}',
    )
    yield DPAlgorithmStep(
        table,
        "Base cases: First row and column initialized to 0 "
        "(empty string has LCS 0 with any string)",
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            c1, c2 = str1[i - 1], str2[j - 1]

            if c1 == c2:
                diag = table.value(i - 1, j - 1)
                yield DPAlgorithmStep(
                    table, f"Characters match: '{c1}' = '{c2}'",
                    current_cell=(i, j),
                    highlighted_cells=[(i - 1, j - 1)],
                    comparison=f"LCS[{i}][{j}] = LCS[{i - 1}][{j - 1}] + 1 = {diag} + 1",
                )
                update_dp_cell(table, i, j, diag + 1, [(i - 1, j - 1)])
            else:
                top, left = table.value(i - 1, j), table.value(i, j - 1)
                yield DPAlgorithmStep(
                    table, f"Characters differ: '{c1}' ≠ '{c2}'",
                    current_cell=(i, j),
                    highlighted_cells=[(i - 1, j), (i, j - 1)],
                    comparison=(
                        f"LCS[{i}][{j}] = max(LCS[{i - 1}][{j}], LCS[{i}][{j - 1}]) "
                        f"= max({top}, {left})"
                    ),
                )
                winner = (i - 1, j) if top >= left else (i, j - 1)
                update_dp_cell(table, i, j, max(top, left), [winner])

            yield DPAlgorithmStep(
                table, f"LCS[{i}][{j}] = {table.value(i, j)}", current_cell=(i, j),
            )

    subsequence = backtrack_lcs(table, str1)
    length = table.value(m, n)
    yield DPAlgorithmStep(
        table,
        f'LCS complete. Length: {length}, Subsequence: "{subsequence}"',
        result=LCSResult(length, subsequence),
    )


def backtrack_lcs(table: DPTable, str1: str) -> str:
    """Walk dependencies from the bottom-right cell back to the border."""
    i, j = table.rows - 1, table.cols - 1
    chars: List[str] = []
    while i > 0 and j > 0:
        prev_i, prev_j = table.cells[i][j].dependencies[0]
        if (prev_i, prev_j) == (i - 1, j - 1):
            chars.append(str1[i - 1])
        i, j = prev_i, prev_j
    chars.reverse()
    return "".join(chars)
