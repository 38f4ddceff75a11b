"""Tests for the tabulation algorithms."""
import itertools
import random

import pytest

from algorithms import DP_REGISTRY, KnapsackItem, KnapsackResult, LCSResult

fibonacci = DP_REGISTRY["fibonacci"].execute
lcs = DP_REGISTRY["lcs"].execute
knapsack = DP_REGISTRY["knapsack"].execute


def is_subsequence(sub, s):
    it = iter(s)
    return all(ch in it for ch in sub)


class TestFibonacci:
    def test_fib_10(self):
        assert fibonacci(10)[-1].result == 55

    def test_recurrence_holds_in_table(self):
        table = fibonacci(15)[-1].table
        row = [table.value(0, c) for c in range(table.cols)]
        assert row[:2] == [0, 1]
        for i in range(2, len(row)):
            assert row[i] == row[i - 1] + row[i - 2]

    def test_zero(self):
        steps = fibonacci(0)
        assert len(steps) == 1
        assert steps[0].result == 0

    def test_negative_is_reported(self):
        steps = fibonacci(-3)
        assert len(steps) == 1
        assert steps[0].description == "Invalid input: n must be non-negative"
        assert steps[0].result is None

    def test_decision_step_precedes_write(self):
        steps = fibonacci(3)
        decisions = [s for s in steps if s.highlighted_cells]
        assert decisions[0].current_cell == (0, 2)
        # the cell being decided is not yet computed in the decision frame
        assert decisions[0].table.cells[0][2].is_computed is False

    def test_dependencies_recorded(self):
        table = fibonacci(4)[-1].table
        assert table.cells[0][4].dependencies == [(0, 3), (0, 2)]


class TestLCS:
    def test_scenario(self):
        result = lcs("ABCDGH", "AEDFHR")[-1].result
        assert result == LCSResult(3, "ADH")

    def test_empty_input(self):
        steps = lcs("", "ABC")
        assert len(steps) == 1
        assert steps[0].result.length == 0

    def test_identical_strings(self):
        assert lcs("HELLO", "HELLO")[-1].result.subsequence == "HELLO"

    def test_no_common_characters(self):
        assert lcs("ABC", "XYZ")[-1].result == LCSResult(0, "")

    @pytest.mark.parametrize("seed", range(10))
    def test_symmetric_and_common(self, seed):
        rng = random.Random(seed)
        a = "".join(rng.choice("ABCD") for _ in range(rng.randint(1, 9)))
        b = "".join(rng.choice("ABCD") for _ in range(rng.randint(1, 9)))
        ab = lcs(a, b)[-1].result
        ba = lcs(b, a)[-1].result
        assert ab.length == ba.length == len(ab.subsequence)
        assert is_subsequence(ab.subsequence, a)
        assert is_subsequence(ab.subsequence, b)

    def test_table_labels(self):
        table = lcs("AB", "B")[-1].table
        assert table.row_labels == ["", "A", "B"]
        assert table.col_labels == ["", "B"]


SCENARIO_ITEMS = [KnapsackItem(10, 60), KnapsackItem(20, 100), KnapsackItem(30, 120)]


def brute_force(items, capacity):
    best = 0
    for r in range(len(items) + 1):
        for combo in itertools.combinations(items, r):
            if sum(i.weight for i in combo) <= capacity:
                best = max(best, sum(i.value for i in combo))
    return best


class TestKnapsack:
    def test_scenario(self):
        result = knapsack(SCENARIO_ITEMS, 50)[-1].result
        assert result == KnapsackResult(220, (1, 2), 50)

    def test_row_and_column_labels(self):
        table = knapsack(SCENARIO_ITEMS[:1], 2)[-1].table
        assert table.row_labels == ["∅", "Item 1"]
        assert table.col_labels == ["W=0", "W=1", "W=2"]

    def test_non_positive_capacity(self):
        steps = knapsack(SCENARIO_ITEMS, 0)
        assert len(steps) == 1
        assert steps[0].result.max_value == 0

    def test_no_items(self):
        steps = knapsack([], 10)
        assert len(steps) == 1
        assert steps[0].result.selected_items == ()

    def test_negative_item_rejected(self):
        steps = knapsack([KnapsackItem(-1, 5)], 10)
        assert len(steps) == 1
        assert "non-negative" in steps[0].description

    def test_tie_prefers_exclude(self):
        table = knapsack([KnapsackItem(1, 5), KnapsackItem(1, 5)], 1)[-1].table
        assert table.cells[2][1].dependencies == [(1, 1)]

    @pytest.mark.parametrize("seed", range(10))
    def test_round_trip(self, seed):
        rng = random.Random(seed)
        items = [KnapsackItem(rng.randint(1, 8), rng.randint(0, 20)) for _ in range(rng.randint(1, 6))]
        capacity = rng.randint(1, 20)
        result = knapsack(items, capacity)[-1].result

        assert result.total_weight <= capacity
        assert result.total_weight == sum(items[i].weight for i in result.selected_items)
        assert result.max_value == sum(items[i].value for i in result.selected_items)
        assert result.max_value == brute_force(items, capacity)
        for item in items:
            if item.weight <= capacity:
                assert result.max_value >= item.value

    def test_item_from_dict(self):
        item = KnapsackItem.from_dict({"weight": "3", "value": 4, "name": "gold"})
        assert item == KnapsackItem(3, 4, "gold")
        assert KnapsackItem.from_dict({"weight": 2.0, "value": "5"}) == KnapsackItem(2, 5)

    @pytest.mark.parametrize("raw", [
        {"weight": 2.9, "value": 4},
        {"weight": 2, "value": "4.5"},
        {"weight": True, "value": 4},
        {"weight": float("nan"), "value": 4},
    ])
    def test_item_from_dict_rejects_fractional(self, raw):
        with pytest.raises(ValueError):
            KnapsackItem.from_dict(raw)

    def test_result_to_dict(self):
        step = knapsack(SCENARIO_ITEMS, 50)[-1]
        assert step.to_dict()["result"] == {
            "max_value": 220, "selected_items": [1, 2], "total_weight": 50,
        }
