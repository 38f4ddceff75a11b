"""
fibonacci.py — Fibonacci by tabulation
======================================
1 × (n+1) table.  F(0) and F(1) are written as explicit base-case steps;
every later cell shows its two source cells first, then the sum.
"""

from typing import Generator, List

from dptable import create_dp_table, update_dp_cell
from algorithms.step import DPAlgorithmStep


PSEUDOCODE: List[str] = [
    "def fibonacci(n):",
    "    F = [0] * (n + 1)",
    "    F[1] = 1",
    "    for i in range(2, n + 1):",
    "        F[i] = F[i - 1] + F[i - 2]",
    "    return F[n]",
]


def fibonacci(n: int) -> Generator[DPAlgorithmStep, None, None]:
    if n < 0:
        yield DPAlgorithmStep(create_dp_table(1, 1), "Invalid input: n must be non-negative")
        return

    if n == 0:
        table = create_dp_table(1, 1)
        table.col_labels = ["F(0)"]
        update_dp_cell(table, 0, 0, 0)
        yield DPAlgorithmStep(table, "F(0) = 0", current_cell=(0, 0), result=0)
        return

    size = n + 1
    table = create_dp_table(1, size)
    table.col_labels = [f"F({i})" for i in range(size)]

    yield DPAlgorithmStep(
        table, f"Computing Fibonacci({n}) using dynamic programming. Table size: {size}",
    )

    update_dp_cell(table, 0, 0, 0)
    yield DPAlgorithmStep(table, "Base case: F(0) = 0", current_cell=(0, 0))

    update_dp_cell(table, 0, 1, 1)
    yield DPAlgorithmStep(table, "Base case: F(1) = 1", current_cell=(0, 1))

    for i in range(2, size):
        prev1 = table.value(0, i - 1)
        prev2 = table.value(0, i - 2)
        deps = [(0, i - 1), (0, i - 2)]

        yield DPAlgorithmStep(
            table,
            f"Computing F({i}) = F({i - 1}) + F({i - 2}) = {prev1} + {prev2}",
            current_cell=(0, i),
            highlighted_cells=deps,
            comparison=f"Reusing computed values: F({i - 1}) = {prev1}, F({i - 2}) = {prev2}",
        )

        update_dp_cell(table, 0, i, prev1 + prev2, deps)
        yield DPAlgorithmStep(table, f"F({i}) = {prev1 + prev2}", current_cell=(0, i))

    answer = table.value(0, n)
    yield DPAlgorithmStep(table, f"Fibonacci({n}) = {answer}", result=answer)
