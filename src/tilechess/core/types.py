"""Cell coordinate value type and helpers.

Coordinates are ``(i, j)``: ``i`` is the file (column), ``j`` the rank
(row).  On the default board both run 0..7, so ``(0, 0)`` is a1 and
``(7, 7)`` is h8.
"""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import Color

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class CellPosition:
    """Immutable board coordinate."""

    i: int
    j: int

    def offset(self, di: int, dj: int) -> CellPosition:
        """New position shifted by ``(di, dj)``."""
        return CellPosition(self.i + di, self.j + dj)

    def __str__(self) -> str:
        return f"({self.i}, {self.j})"


def cell_name(cell: CellPosition) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1'."""
    if not (0 <= cell.i < 8 and 0 <= cell.j < 8):
        return str(cell)
    return _FILES[cell.i] + _RANKS[cell.j]


def parse_cell(name: str) -> CellPosition:
    """Parse cell name, e.g. 'e4' → (4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid cell name: {name!r}")
    return CellPosition(_FILES.index(name[0]), _RANKS.index(name[1]))


def cell_shade(cell: CellPosition) -> Color:
    """Tile colour: cells with an even coordinate sum are light."""
    return Color.WHITE if (cell.i + cell.j) % 2 == 0 else Color.BLACK
