"""
linear_search.py — Linear Search
================================
Scans index 0..n-1 and stops at the first match, so the reported index is
always the first occurrence.
"""

from typing import Generator, List

from algorithms.common import trivial_search
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",
    "    for i in range(len(arr)):",
    "        if arr[i] == target:",
    "            return i",
    "    return -1",
]


def linear_search(arr: List[int], target: int = 0) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    if len(work) <= 1:
        yield from trivial_search(work, target)
        return

    yield AlgorithmStep(work, -1, f"Starting linear search for {target}")

    for i, value in enumerate(work):
        if value == target:
            comparison = f"Found! {value} equals {target}"
        else:
            comparison = f"{value} does not equal {target}, continue searching"
        yield AlgorithmStep(work, i, f"Checking index {i}: value is {value}", comparison=comparison)

        if value == target:
            yield AlgorithmStep(work, i, f"Success! Found {target} at index {i}")
            return

    yield AlgorithmStep(work, -1, f"{target} not found in array")
