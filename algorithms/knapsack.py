"""
knapsack.py — 0/1 Knapsack
==========================
(n+1) × (capacity+1) table.  Row i considers the first i items.

    weight > w  → K[i][w] = K[i-1][w]                   (exclude forced)
    otherwise   → K[i][w] = max(include, exclude)
                  include = value + K[i-1][w - weight]
                  exclude = K[i-1][w]

The dependency records the winning branch; a tie records "exclude" because
the include branch must be strictly better to win.

Backtracking walks rows n..1 at column w: K[i][w] != K[i-1][w] means item
i-1 was taken, and w drops by its weight.  The reported max value is
therefore exactly the sum of the selected items' values.
"""

from dataclasses import dataclass
from typing import Generator, List, Optional, Sequence, Tuple

from dptable import DPTable, create_dp_table, update_dp_cell
from algorithms.step import DPAlgorithmStep


PSEUDOCODE: List[str] = [
    "def knapsack(items, W):",
    "    K = [[0] * (W + 1) for _ in range(len(items) + 1)]",
    "    for i, (wt, val) in enumerate(items, 1):",
    "        for w in range(W + 1):",
    "            K[i][w] = K[i - 1][w]",
    "            if wt <= w:",
    "                K[i][w] = max(K[i][w], val + K[i - 1][w - wt])",
    "    return K[len(items)][W]",
]


@dataclass(frozen=True)
class KnapsackItem:
    weight: int
    value:  int
    name:   Optional[str] = None

    def label(self, index: int) -> str:
        return self.name or f"Item {index + 1}"

    @classmethod
    def from_dict(cls, data: dict) -> "KnapsackItem":
        """Raises ValueError for a weight or value that is not a whole number."""
        return cls(
            weight=_whole(data["weight"], "weight"),
            value=_whole(data["value"], "value"),
            name=data.get("name"),
        )


def _whole(raw, field_name: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a whole number, got {raw!r}")
    number = float(raw)
    if not number.is_integer():
        raise ValueError(f"{field_name} must be a whole number, got {raw!r}")
    return int(number)


@dataclass(frozen=True)
class KnapsackResult:
    max_value:      int
    selected_items: Tuple[int, ...]
    total_weight:   int

    def to_dict(self) -> dict:
        return {
            "max_value":      self.max_value,
            "selected_items": list(self.selected_items),
            "total_weight":   self.total_weight,
        }


EMPTY_RESULT = KnapsackResult(0, (), 0)


def knapsack(items: Sequence[KnapsackItem], capacity: int) -> Generator[DPAlgorithmStep, None, None]:
    items = list(items)
    if not items:
        yield DPAlgorithmStep(create_dp_table(1, 1), "No items provided.", result=EMPTY_RESULT)
        return
    if capacity <= 0:
        yield DPAlgorithmStep(
            create_dp_table(1, 1), "Invalid capacity. Must be positive.", result=EMPTY_RESULT,
        )
        return
    for idx, item in enumerate(items):
        if item.weight < 0 or item.value < 0:
            yield DPAlgorithmStep(
                create_dp_table(1, 1),
                f"Invalid item {item.label(idx)}: weight and value must be non-negative.",
                result=EMPTY_RESULT,
            )
            return

    n = len(items)
    table = create_dp_table(n + 1, capacity + 1)
    table.row_labels = ["∅"] + [item.label(i) for i, item in enumerate(items)]
    table.col_labels = [f"W={w}" for w in range(capacity + 1)]

    listing = ", ".join(f"{it.label(i)}(w={it.weight}, v={it.value})" for i, it in enumerate(items))
    yield DPAlgorithmStep(table, f"0/1 Knapsack: {n} items, capacity {capacity}. Items: {listing}")
    yield DPAlgorithmStep(table, "Base case: With 0 items, maximum value is 0 for any capacity")

    for i in range(1, n + 1):
        item = items[i - 1]
        name = item.label(i - 1)

        for w in range(capacity + 1):
            exclude = table.value(i - 1, w)

            if item.weight > w:
                yield DPAlgorithmStep(
                    table, f"{name} (weight={item.weight}) > capacity {w}. Cannot include.",
                    current_cell=(i, w),
                    highlighted_cells=[(i - 1, w)],
                    comparison=f"K[{i}][{w}] = K[{i - 1}][{w}] = {exclude}",
                )
                update_dp_cell(table, i, w, exclude, [(i - 1, w)])
            else:
                rest = w - item.weight
                include = item.value + table.value(i - 1, rest)
                best = max(include, exclude)
                yield DPAlgorithmStep(
                    table,
                    f"{name}: Include ({item.value} + K[{i - 1}][{rest}] = {include}) "
                    f"vs Exclude (K[{i - 1}][{w}] = {exclude})",
                    current_cell=(i, w),
                    highlighted_cells=[(i - 1, w), (i - 1, rest)],
                    comparison=f"K[{i}][{w}] = max({include}, {exclude}) = {best}",
                )
                dep = (i - 1, rest) if include > exclude else (i - 1, w)
                update_dp_cell(table, i, w, best, [dep])

            yield DPAlgorithmStep(
                table, f"K[{i}][{w}] = {table.value(i, w)}", current_cell=(i, w),
            )

    selected = backtrack_knapsack(table, items, capacity)
    total_weight = sum(items[k].weight for k in selected)
    max_value = table.value(n, capacity)
    names = ", ".join(items[k].label(k) for k in selected) or "nothing"
    yield DPAlgorithmStep(
        table,
        f"Knapsack complete. Max value: {max_value}. Selected: {names}",
        result=KnapsackResult(max_value, tuple(selected), total_weight),
    )


def backtrack_knapsack(table: DPTable, items: Sequence[KnapsackItem], capacity: int) -> List[int]:
    selected: List[int] = []
    w = capacity
    for i in range(len(items), 0, -1):
        if table.value(i, w) != table.value(i - 1, w):
            selected.append(i - 1)
            w -= items[i - 1].weight
    selected.reverse()
    return selected
