"""
binary_search.py — Binary Search
================================
Sorts its own copy of the input first; callers may pass unsorted data.
Each iteration shows the [left, right] window and the midpoint.  A
midpoint equal to the target returns immediately.
"""

from typing import Generator, List

from algorithms.common import trivial_search
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",
    "    left, right = 0, len(arr) - 1",
    "    while left <= right:",
    "        mid = (left + right) // 2",
    "        if arr[mid] == target: return mid",
    "        elif arr[mid] < target: left = mid + 1",
    "        else: right = mid - 1",
    "    return -1",
]


def binary_search(arr: List[int], target: int = 0) -> Generator[AlgorithmStep, None, None]:
    work = sorted(arr)
    if len(work) <= 1:
        yield from trivial_search(work, target)
        return

    yield AlgorithmStep(work, -1, f"Starting binary search for {target} (array must be sorted)")

    left, right = 0, len(work) - 1
    while left <= right:
        mid = (left + right) // 2
        yield AlgorithmStep(
            work, mid,
            f"Checking middle index {mid}: value is {work[mid]}",
            left_pointer=left,
            right_pointer=right,
            comparison=f"Comparing {work[mid]} with target {target}",
        )

        if work[mid] == target:
            yield AlgorithmStep(work, mid, f"Success! Found {target} at index {mid}")
            return

        if work[mid] < target:
            yield AlgorithmStep(
                work, mid, f"{work[mid]} < {target}, search right half",
                left_pointer=mid + 1, right_pointer=right,
            )
            left = mid + 1
        else:
            yield AlgorithmStep(
                work, mid, f"{work[mid]} > {target}, search left half",
                left_pointer=left, right_pointer=mid - 1,
            )
            right = mid - 1

    yield AlgorithmStep(work, -1, f"{target} not found in array")
