"""
interpolation_search.py — Interpolation Search
==============================================
Probes at the position proportional to where the target sits between
arr[low] and arr[high].  Input is sorted first.
"""

from typing import Generator, List

from algorithms.common import trivial_search
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def interpolation_search(arr, target):",
    "    low, high = 0, len(arr) - 1",
    "    while low <= high and arr[low] <= target <= arr[high]:",
    "        if low == high: return low if arr[low] == target else -1",
    "        pos = low + (target - arr[low]) * (high - low) // (arr[high] - arr[low])",
    "        if arr[pos] == target: return pos",
    "        if arr[pos] < target: low = pos + 1",
    "        else: high = pos - 1",
    "    return -1",
]


def interpolation_search(arr: List[int], target: int = 0) -> Generator[AlgorithmStep, None, None]:
    work = sorted(arr)
    if len(work) <= 1:
        yield from trivial_search(work, target)
        return

    yield AlgorithmStep(work, -1, f"Starting interpolation search for {target}")

    low, high = 0, len(work) - 1
    while low <= high and work[low] <= target <= work[high]:
        # a flat range means every value in it equals the target
        if low == high or work[low] == work[high]:
            if work[low] == target:
                yield AlgorithmStep(work, low, f"Success! Found {target} at index {low}")
                return
            break

        pos = low + (target - work[low]) * (high - low) // (work[high] - work[low])
        yield AlgorithmStep(
            work, pos,
            f"Interpolated position: {pos}, value: {work[pos]}",
            left_pointer=low,
            right_pointer=high,
            comparison=f"Comparing {work[pos]} with {target}",
        )

        if work[pos] == target:
            yield AlgorithmStep(work, pos, f"Success! Found {target} at index {pos}")
            return

        if work[pos] < target:
            low = pos + 1
        else:
            high = pos - 1

    yield AlgorithmStep(work, -1, f"{target} not found in array")
