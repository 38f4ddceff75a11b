"""
common.py — shared edge cases for the array algorithms
======================================================
Empty and single-element inputs never reach an algorithm's main loop:
they produce exactly one step, here.
"""

from typing import Generator, List

from algorithms.step import AlgorithmStep


def all_indices(n: int) -> List[int]:
    return list(range(n))


def head_indices(k: int) -> List[int]:
    """The first k positions, sorted from the head."""
    return list(range(k))


def tail_indices(n: int, k: int) -> List[int]:
    """The last k positions of an n-array, sorted from the tail."""
    return [n - 1 - i for i in range(k)]


def trivial_search(arr: List[int], target: int) -> Generator[AlgorithmStep, None, None]:
    if not arr:
        yield AlgorithmStep([], -1, f"Empty array: {target} not found in array")
    elif arr[0] == target:
        yield AlgorithmStep(arr, 0, f"Success! Found {target} at index 0")
    else:
        yield AlgorithmStep(arr, -1, f"{target} not found in array")


def trivial_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    if not arr:
        yield AlgorithmStep([], -1, "Empty array", sorted_indices=[])
    else:
        yield AlgorithmStep(arr, -1, "Single element is already sorted", sorted_indices=[0])
