"""
counting_sort.py — Counting Sort
================================
Non-comparison sort.  Counts are offset by min(arr) so negative values
work; the counts become cumulative end positions and elements are placed
back-to-front, which keeps equal values stable.
"""

from typing import Generator, List, Optional

from algorithms.common import all_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def counting_sort(arr):",
    "    lo, hi = min(arr), max(arr)",
    "    count = [0] * (hi - lo + 1)",
    "    for x in arr: count[x - lo] += 1",
    "    for i in range(1, len(count)): count[i] += count[i - 1]",
    "    for x in reversed(arr):",
    "        count[x - lo] -= 1",
    "        output[count[x - lo]] = x",
]


def counting_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    lo, hi = min(work), max(work)
    count = [0] * (hi - lo + 1)
    output: List[Optional[int]] = [None] * n

    yield AlgorithmStep(
        work, -1, f"Starting counting sort. Range: {lo} to {hi}",
        auxiliary_array=count,
    )

    for i, value in enumerate(work):
        count[value - lo] += 1
        yield AlgorithmStep(
            work, i, f"Counting {value}: count[{value - lo}] = {count[value - lo]}",
            auxiliary_array=count,
        )

    for i in range(1, len(count)):
        count[i] += count[i - 1]

    yield AlgorithmStep(
        work, -1, f"Cumulative count: [{', '.join(map(str, count))}]",
        auxiliary_array=count,
    )

    for i in range(n - 1, -1, -1):
        value = work[i]
        count[value - lo] -= 1
        pos = count[value - lo]
        output[pos] = value
        # unfilled slots render as 0
        yield AlgorithmStep(
            [0 if v is None else v for v in output], pos,
            f"Placed {value} at position {pos}",
            auxiliary_array=count,
        )

    yield AlgorithmStep(
        output, -1, "Counting sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )
