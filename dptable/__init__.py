"""
dptable/
--------
Tabulation grid shared by the dynamic-programming algorithms.

    from dptable import DPTable, DPCell, create_dp_table, update_dp_cell
"""

from dptable.cell  import DPCell, CellRef
from dptable.table import DPTable, create_dp_table, update_dp_cell

__all__ = [
    "DPCell",
    "CellRef",
    "DPTable",
    "create_dp_table",
    "update_dp_cell",
]
