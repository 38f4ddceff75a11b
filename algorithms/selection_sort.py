"""
selection_sort.py — Selection Sort
==================================
For each position, scan the remainder for the minimum and swap it into
place.  `sorted_indices` grows from the head.
"""

from typing import Generator, List

from algorithms.common import all_indices, head_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",
    "    for i in range(n - 1):",
    "        min_idx = i",
    "        for j in range(i + 1, n):",
    "            if arr[j] < arr[min_idx]: min_idx = j",
    "        arr[i], arr[min_idx] = arr[min_idx], arr[i]",
]


def selection_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(work, -1, "Starting selection sort", sorted_indices=[])

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            smaller = work[j] < work[min_idx]
            yield AlgorithmStep(
                work, j,
                f"Comparing {work[j]} with current minimum {work[min_idx]}",
                compare_index=min_idx,
                sorted_indices=head_indices(i),
                comparison=(
                    f"Found new minimum: {work[j]}" if smaller
                    else f"{work[min_idx]} is still the minimum"
                ),
            )
            if smaller:
                min_idx = j

        if min_idx != i:
            yield AlgorithmStep(
                work, i, f"Swapping {work[i]} and {work[min_idx]}",
                compare_index=min_idx,
                sorted_indices=head_indices(i),
            )
            work[i], work[min_idx] = work[min_idx], work[i]

        yield AlgorithmStep(
            work, i, f"Position {i} is now sorted with value {work[i]}",
            sorted_indices=head_indices(i + 1),
        )

    yield AlgorithmStep(
        work, -1, "Selection sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )
