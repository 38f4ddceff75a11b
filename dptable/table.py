"""
table.py — DP Table
===================
The grid the tabulation algorithms fill bottom-up.

The algorithms own ONE working table and mutate it cell by cell; every
DPAlgorithmStep stores `table.clone()`, so a recorded frame never changes
after it has been emitted.
"""

from typing import List, Optional

from dptable.cell import DPCell, CellRef


class DPTable:
    """
    Attributes:
        cells      : rows × cols grid of DPCell
        rows, cols : dimensions
        row_labels : optional header per row  (e.g. the characters of str1)
        col_labels : optional header per col  (e.g. "F(3)", "W=7")
    """

    def __init__(
        self,
        cells: List[List[DPCell]],
        rows: int,
        cols: int,
        row_labels: Optional[List[str]] = None,
        col_labels: Optional[List[str]] = None,
    ):
        self.cells      = cells
        self.rows       = rows
        self.cols       = cols
        self.row_labels = row_labels
        self.col_labels = col_labels

    def value(self, row: int, col: int) -> int:
        return self.cells[row][col].value

    def clone(self) -> "DPTable":
        return DPTable(
            cells=[[c.copy() for c in row] for row in self.cells],
            rows=self.rows,
            cols=self.cols,
            row_labels=list(self.row_labels) if self.row_labels is not None else None,
            col_labels=list(self.col_labels) if self.col_labels is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "rows":       self.rows,
            "cols":       self.cols,
            "row_labels": self.row_labels,
            "col_labels": self.col_labels,
            "cells":      [[c.to_dict() for c in row] for row in self.cells],
        }

    def __repr__(self) -> str:
        return f"DPTable({self.rows}x{self.cols})"


def create_dp_table(rows: int, cols: int, default_value: int = 0) -> DPTable:
    cells = [
        [DPCell(value=default_value, row=r, col=c) for c in range(cols)]
        for r in range(rows)
    ]
    return DPTable(cells, rows, cols)


def update_dp_cell(
    table: DPTable,
    row: int,
    col: int,
    value: int,
    dependencies: Optional[List[CellRef]] = None,
) -> None:
    """Write a computed value.  Out-of-range indices are a caller bug."""
    if not (0 <= row < table.rows and 0 <= col < table.cols):
        raise IndexError(f"cell ({row}, {col}) outside {table.rows}x{table.cols} table")
    cell = table.cells[row][col]
    cell.value        = value
    cell.is_computed  = True
    cell.dependencies = list(dependencies or [])
