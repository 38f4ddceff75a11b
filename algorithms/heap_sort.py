"""
heap_sort.py — Heap Sort
========================
Bottom-up build of a max-heap, then repeatedly swap the root with the last
unsorted slot and sift the new root down.  `sorted_indices` grows from the
tail.
"""

from typing import Generator, List

from algorithms.common import all_indices, tail_indices, trivial_sort
from algorithms.step import AlgorithmStep


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",
    "    for i in range(n // 2 - 1, -1, -1):",
    "        heapify(arr, n, i)",
    "    for end in range(n - 1, 0, -1):",
    "        arr[0], arr[end] = arr[end], arr[0]",
    "        heapify(arr, end, 0)",
]


def heap_sort(arr: List[int]) -> Generator[AlgorithmStep, None, None]:
    work = list(arr)
    n = len(work)
    if n <= 1:
        yield from trivial_sort(work)
        return

    yield AlgorithmStep(work, -1, "Starting heap sort - building max heap")

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(work, n, i)

    yield AlgorithmStep(work, -1, f"Max heap built: [{', '.join(map(str, work))}]")

    for end in range(n - 1, 0, -1):
        work[0], work[end] = work[end], work[0]
        yield AlgorithmStep(
            work, 0, f"Moved max {work[end]} to position {end}",
            compare_index=end,
            sorted_indices=tail_indices(n, n - end),
        )
        yield from _heapify(work, end, 0)

    yield AlgorithmStep(
        work, -1, "Heap sort complete! Array is fully sorted",
        sorted_indices=all_indices(n),
    )


def _heapify(work: List[int], size: int, root: int) -> Generator[AlgorithmStep, None, None]:
    """Sift-down, iterative; one step per level visited."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2

        yield AlgorithmStep(
            work, root, f"Heapifying at index {root}",
            left_pointer=left if left < size else None,
            right_pointer=right if right < size else None,
        )

        if left < size and work[left] > work[largest]:
            largest = left
        if right < size and work[right] > work[largest]:
            largest = right
        if largest == root:
            return

        work[root], work[largest] = work[largest], work[root]
        yield AlgorithmStep(
            work, root, f"Swapped {work[largest]} and {work[root]}",
            compare_index=largest,
        )
        root = largest
