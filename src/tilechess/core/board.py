"""Board geometry - the coordinate domain of an N×N grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tilechess.core.types import CellPosition


@dataclass(frozen=True, slots=True)
class Board:
    """Inclusive coordinate range ``first_element..last_element`` on both axes."""

    first_element: int = 0
    last_element: int = 7

    def __post_init__(self) -> None:
        if self.last_element < self.first_element:
            raise ValueError(
                f"Invalid board range: {self.first_element}..{self.last_element}"
            )

    @property
    def size(self) -> int:
        """Number of cells along one edge."""
        return self.last_element - self.first_element + 1

    def cell_range(self) -> range:
        """Valid coordinate values, in increasing order."""
        return range(self.first_element, self.last_element + 1)

    def is_out_of_range(self, cell: CellPosition) -> bool:
        return self._out(cell.i) or self._out(cell.j)

    def cells(self) -> Iterator[CellPosition]:
        """Every cell, rank by rank from the low rank upward."""
        for j in self.cell_range():
            for i in self.cell_range():
                yield CellPosition(i, j)

    def _out(self, value: int) -> bool:
        return value < self.first_element or value > self.last_element


DEFAULT_BOARD = Board()
