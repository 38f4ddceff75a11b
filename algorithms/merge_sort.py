"""
merge_sort.py — Merge Sort
==========================
Top-down split.  Each merge first records both halves (as the auxiliary
array), then every placement into the working array one at a time,
leftovers included, then the merged section.
"""

from typing import Generator, List

from algorithms.common import all_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",
    "    if left < right:",
    "        mid = (left + right) // 2",
    "        merge_sort(arr, left, mid)",
    "        merge_sort(arr, mid + 1, right)",
    "        merge(arr, left, mid, right)",
]


def merge_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(work, -1, "Starting merge sort")
    yield from _merge_sort(work, 0, n - 1)
    yield AlgorithmStep(
        work, -1, "Merge sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )


def _merge_sort(work: List[int], left: int, right: int) -> Generator[AlgorithmStep, None, None]:
    if left >= right:
        return
    mid = (left + right) // 2
    yield AlgorithmStep(
        work, mid, f"Dividing array at index {mid}",
        left_pointer=left,
        right_pointer=right,
    )
    yield from _merge_sort(work, left, mid)
    yield from _merge_sort(work, mid + 1, right)
    yield from _merge(work, left, mid, right)


def _merge(work: List[int], left: int, mid: int, right: int) -> Generator[AlgorithmStep, None, None]:
    left_half  = work[left:mid + 1]
    right_half = work[mid + 1:right + 1]

    yield AlgorithmStep(
        work, left,
        f"Merging [{', '.join(map(str, left_half))}] and [{', '.join(map(str, right_half))}]",
        left_pointer=left,
        right_pointer=right,
        auxiliary_array=left_half + right_half,
    )

    i = j = 0
    k = left
    while i < len(left_half) or j < len(right_half):
        # `<=` keeps equal keys in their original order
        if j >= len(right_half) or (i < len(left_half) and left_half[i] <= right_half[j]):
            work[k] = left_half[i]
            i += 1
        else:
            work[k] = right_half[j]
            j += 1
        yield AlgorithmStep(work, k, f"Placed {work[k]} at position {k}")
        k += 1

    yield AlgorithmStep(
        work, left,
        f"Merged section [{left}:{right}]: [{', '.join(map(str, work[left:right + 1]))}]",
        left_pointer=left,
        right_pointer=right,
    )
