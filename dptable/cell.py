"""
cell.py — DP Table Cell
=======================
One entry of a tabulation grid.

`dependencies` holds (row, col) index pairs into the SAME table: exactly
the cells read to compute `value`.  Indices rather than object references
keep a cloned table self-contained and make backtracking a walk over the
grid.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

CellRef = Tuple[int, int]


@dataclass
class DPCell:
    value:        int
    row:          int
    col:          int
    highlighted:  bool          = False
    is_computed:  bool          = False
    dependencies: List[CellRef] = field(default_factory=list)

    def copy(self) -> "DPCell":
        return DPCell(
            value=self.value,
            row=self.row,
            col=self.col,
            highlighted=self.highlighted,
            is_computed=self.is_computed,
            dependencies=list(self.dependencies),
        )

    def to_dict(self) -> dict:
        return {
            "value":        self.value,
            "row":          self.row,
            "col":          self.col,
            "highlighted":  self.highlighted,
            "is_computed":  self.is_computed,
            "dependencies": [{"row": r, "col": c} for r, c in self.dependencies],
        }
