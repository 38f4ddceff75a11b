"""
quick_sort.py — Quick Sort (Lomuto partition)
=============================================
Pivot = last element of the range.  Recursive and in place on one working
array; every partition records the pivot, each comparison, each swap, and
the explicit final pivot placement.

Recursion is expressed with `yield from` so the generator stays lazy.
"""

from typing import Generator, List

from algorithms.common import all_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",
    "    if low < high:",
    "        p = partition(arr, low, high)",
    "        quick_sort(arr, low, p - 1)",
    "        quick_sort(arr, p + 1, high)",
    "",
    "def partition(arr, low, high):",
    "    pivot, i = arr[high], low - 1",
    "    for j in range(low, high):",
    "        if arr[j] <= pivot:",
    "            i += 1",
    "            arr[i], arr[j] = arr[j], arr[i]",
    "    arr[i + 1], arr[high] = arr[high], arr[i + 1]",
    "    return i + 1",
]


def quick_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(work, -1, "Starting quick sort")
    yield from _quick_sort(work, 0, n - 1)
    yield AlgorithmStep(
        work, -1, "Quick sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )


def _quick_sort(work: List[int], low: int, high: int) -> Generator[AlgorithmStep, None, None]:
    if low < high:
        pivot_pos = yield from _partition(work, low, high)
        yield from _quick_sort(work, low, pivot_pos - 1)
        yield from _quick_sort(work, pivot_pos + 1, high)


def _partition(work: List[int], low: int, high: int) -> Generator[AlgorithmStep, None, int]:
    pivot = work[high]
    i = low - 1

    yield AlgorithmStep(
        work, low, f"Partitioning [{low}:{high}] with pivot {pivot}",
        pivot_index=high,
    )

    for j in range(low, high):
        yield AlgorithmStep(
            work, j, f"Comparing {work[j]} with pivot {pivot}",
            pivot_index=high,
            left_pointer=i if i >= low else None,
            comparison=(
                f"{work[j]} ≤ {pivot}, swap" if work[j] <= pivot
                else f"{work[j]} > {pivot}, skip"
            ),
        )
        if work[j] <= pivot:
            i += 1
            if i != j:
                work[i], work[j] = work[j], work[i]
                yield AlgorithmStep(
                    work, i, f"Swapped {work[j]} and {work[i]}",
                    compare_index=j,
                    pivot_index=high,
                )

    final = i + 1
    work[final], work[high] = work[high], work[final]
    yield AlgorithmStep(
        work, final, f"Pivot {pivot} placed at position {final}",
        pivot_index=final,
    )
    return final
