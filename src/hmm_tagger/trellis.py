from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .types import Cell

Column = Dict[str, int]


@dataclass
class Trellis:
    words: List[str]
    # arena: every cell of the decode, backpointers index into it
    cells: List[Cell] = field(default_factory=list)
    # columns[i][tag] = arena index of the best cell for tag at position i
    columns: List[Column] = field(default_factory=list)

    def add_column(self) -> Column:
        col: Column = {}
        self.columns.append(col)
        return col

    def add_cell(self, column: Column, cell: Cell) -> int:
        if cell.tag in column:
            raise ValueError(f"column already holds a cell for {cell.tag!r}")
        idx = len(self.cells)
        self.cells.append(cell)
        column[cell.tag] = idx
        return idx

    def column_cells(self, position: int) -> List[Cell]:
        return [self.cells[idx] for idx in self.columns[position].values()]

    def cell(self, position: int, tag: str) -> Optional[Cell]:
        idx = self.columns[position].get(tag)
        return None if idx is None else self.cells[idx]

    def chain(self, idx: int) -> List[Cell]:
        """cells from arena index idx back to the path start, newest first"""
        out: List[Cell] = []
        cur: Optional[int] = idx
        while cur is not None:
            c = self.cells[cur]
            out.append(c)
            cur = c.backpointer
        return out
