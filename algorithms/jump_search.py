"""
jump_search.py — Jump Search
============================
Block size floor(sqrt(n)).  Jumps forward while the block boundary is below
the target, then scans the located block linearly.
"""

import math
from typing import Generator, List

from algorithms.common import trivial_search
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def jump_search(arr, target):",
    "    step = isqrt(len(arr))",
    "    prev, curr = 0, step",
    "    while curr < n and arr[curr] < target:",
    "        prev, curr = curr, curr + step",
    "    for i in range(prev, min(curr, n - 1) + 1):",
    "        if arr[i] == target: return i",
    "    return -1",
]


def jump_search(arr: List[int], target: int = 0) -> Generator[AlgorithmStep, None, None]:
    work = sorted(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_search(work, target)
        return

    jump = math.isqrt(n)
    yield AlgorithmStep(work, -1, f"Starting jump search for {target}. Jump size: {jump}")

    prev, curr = 0, jump
    while curr < n and work[curr] < target:
        yield AlgorithmStep(
            work, curr,
            f"Jumping to index {curr}: value {work[curr]} < {target}",
            left_pointer=prev,
        )
        prev = curr
        curr += jump

    end = min(curr, n - 1)
    yield AlgorithmStep(
        work, end,
        f"Block found. Linear search from index {prev} to {end}",
        left_pointer=prev,
        right_pointer=end,
    )

    for i in range(prev, end + 1):
        found = work[i] == target
        yield AlgorithmStep(
            work, i,
            f"Checking index {i}: value is {work[i]}",
            comparison="Found!" if found else "Continue...",
        )
        if found:
            yield AlgorithmStep(work, i, f"Success! Found {target} at index {i}")
            return

    yield AlgorithmStep(work, -1, f"{target} not found in array")
