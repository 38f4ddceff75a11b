"""
insertion_sort.py — Insertion Sort
==================================
Shift-and-insert.  The head [0, i) is sorted relative to itself; the
prefix is recorded once per outer iteration.
"""

from typing import Generator, List

from algorithms.common import all_indices, head_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",
    "    for i in range(1, n):",
    "        key, j = arr[i], i - 1",
    "        while j >= 0 and arr[j] > key:",
    "            arr[j + 1] = arr[j]",
    "            j -= 1",
    "        arr[j + 1] = key",
]


def insertion_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(
        work, -1, "Starting insertion sort. First element is already sorted.",
        sorted_indices=[0],
    )

    for i in range(1, n):
        key = work[i]
        j = i - 1
        yield AlgorithmStep(
            work, i, f"Inserting {key} into sorted portion",
            sorted_indices=head_indices(i),
        )

        while j >= 0 and work[j] > key:
            yield AlgorithmStep(
                work, j + 1, f"{work[j]} > {key}, shift right",
                compare_index=j,
                sorted_indices=head_indices(i),
            )
            work[j + 1] = work[j]
            j -= 1

        work[j + 1] = key
        yield AlgorithmStep(
            work, j + 1, f"Inserted {key} at position {j + 1}",
            sorted_indices=head_indices(i + 1),
        )

    yield AlgorithmStep(
        work, -1, "Insertion sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )
