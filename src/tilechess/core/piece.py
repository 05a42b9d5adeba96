"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import Color, PieceType
from tilechess.core.types import CellPosition

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece of some kind and colour on a cell."""

    position: CellPosition
    color: Color
    kind: PieceType

    @classmethod
    def at(cls, i: int, j: int, color: Color, kind: PieceType) -> Piece:
        """Shorthand constructor from raw coordinates."""
        return cls(CellPosition(i, j), color, kind)

    def moved_to(self, cell: CellPosition) -> Piece:
        """Copy of this piece relocated to *cell*."""
        return Piece(cell, self.color, self.kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        return f"{self.symbol}{self.position}"
