"""
bubble_sort.py — Bubble Sort
============================
Adjacent-swap passes.  After pass i the last i+1 positions are final, so
`sorted_indices` grows from the tail.  A pass with no swaps ends the sort.
"""

from typing import Generator, List

from algorithms.common import all_indices, tail_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",
    "    for i in range(n - 1):",
    "        swapped = False",
    "        for j in range(n - i - 1):",
    "            if arr[j] > arr[j + 1]:",
    "                arr[j], arr[j + 1] = arr[j + 1], arr[j]",
    "                swapped = True",
    "        if not swapped: break",
]


def bubble_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(work, -1, "Starting bubble sort", sorted_indices=[])

    for i in range(n - 1):
        swapped = False
        done = tail_indices(n, i)
        for j in range(n - i - 1):
            a, b = work[j], work[j + 1]
            yield AlgorithmStep(
                work, j, f"Comparing {a} and {b}",
                compare_index=j + 1,
                sorted_indices=done,
                comparison=f"{a} > {b}, swap them" if a > b else f"{a} ≤ {b}, no swap needed",
            )
            if a > b:
                work[j], work[j + 1] = b, a
                swapped = True
                yield AlgorithmStep(
                    work, j,
                    f"Swapped: array is now [{', '.join(map(str, work))}]",
                    compare_index=j + 1,
                    sorted_indices=done,
                )
        if not swapped:
            break

    yield AlgorithmStep(
        work, -1, "Bubble sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )
