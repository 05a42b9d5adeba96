"""TileMap parsing and serialization.

A tile map is one ``|``-delimited line per rank, highest rank first::

    |b_ro|b_kn|b_bi|b_ki|b_qu|b_bi|b_kn|b_ro|
    |b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|
    |none|none|none|none|none|none|none|none|
    ...

Each token is ``none`` or ``{color}_{kind}``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tilechess.core.board import DEFAULT_BOARD, Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.types import CellPosition

_LOGGER = logging.getLogger(__name__)

EMPTY_TOKEN = "none"

_COLOR_CODES: dict[Color, str] = {Color.WHITE: "w", Color.BLACK: "b"}
_KIND_CODES: dict[PieceType, str] = {
    PieceType.PAWN: "pa",
    PieceType.ROOK: "ro",
    PieceType.KNIGHT: "kn",
    PieceType.BISHOP: "bi",
    PieceType.KING: "ki",
    PieceType.QUEEN: "qu",
}

# token ↔ (Color, PieceType)
_TOKEN_MAP: dict[str, tuple[Color, PieceType]] = {
    f"{c_code}_{k_code}": (color, kind)
    for color, c_code in _COLOR_CODES.items()
    for kind, k_code in _KIND_CODES.items()
}
_TOKENS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _TOKEN_MAP.items()}

STARTING_TILE_MAP = (
    "|b_ro|b_kn|b_bi|b_ki|b_qu|b_bi|b_kn|b_ro|\n"
    "|b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|b_pa|\n"
    "|none|none|none|none|none|none|none|none|\n"
    "|none|none|none|none|none|none|none|none|\n"
    "|none|none|none|none|none|none|none|none|\n"
    "|none|none|none|none|none|none|none|none|\n"
    "|w_pa|w_pa|w_pa|w_pa|w_pa|w_pa|w_pa|w_pa|\n"
    "|w_ro|w_kn|w_bi|w_ki|w_qu|w_bi|w_kn|w_ro|\n"
)


def piece_token(piece: Piece | None) -> str:
    """Tile-map token for *piece*, e.g. white bishop → 'w_bi'."""
    if piece is None:
        return EMPTY_TOKEN
    return _TOKENS[(piece.color, piece.kind)]


def parse_token(
    token: str, cell: CellPosition, *, strict: bool = False
) -> Piece | None:
    """Piece described by *token* placed on *cell*.

    Unknown tokens yield ``None``; with *strict* they raise ``ValueError``.
    """
    if token == EMPTY_TOKEN:
        return None
    entry = _TOKEN_MAP.get(token)
    if entry is None:
        if strict:
            raise ValueError(f"Invalid tile-map token {token!r} at {cell}")
        _LOGGER.debug("Unknown tile-map token %r at %s, left empty", token, cell)
        return None
    color, kind = entry
    return Piece(cell, color, kind)


def encode(pieces: Iterable[Piece], board: Board = DEFAULT_BOARD) -> str:
    """Serialise a snapshot to tile-map text."""
    by_cell = {piece.position: piece for piece in pieces}
    rows: list[str] = []
    for j in reversed(board.cell_range()):
        tokens = [
            piece_token(by_cell.get(CellPosition(i, j))) for i in board.cell_range()
        ]
        rows.append("|" + "|".join(tokens) + "|")
    return "\n".join(rows) + "\n"


def decode(
    text: str, board: Board = DEFAULT_BOARD, *, strict: bool = False
) -> list[Piece | None]:
    """Parse tile-map text into a cell-indexed list.

    Entry ``k`` describes file ``first + k % width`` on rank ``first + k // width``
    where ``width`` is the number of tokens on the line.  Blank lines and
    indentation are ignored.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    cells: list[Piece | None] = []
    for rank_idx, line in enumerate(reversed(lines)):
        tokens = [tok.strip() for tok in line.split("|") if tok.strip()]
        for file_idx, token in enumerate(tokens):
            cell = CellPosition(
                board.first_element + file_idx, board.first_element + rank_idx
            )
            cells.append(parse_token(token, cell, strict=strict))
    return cells


def pieces_from_tile_map(
    text: str, board: Board = DEFAULT_BOARD, *, strict: bool = False
) -> list[Piece]:
    """Occupied cells of a tile map as a snapshot."""
    return [piece for piece in decode(text, board, strict=strict) if piece is not None]


def starting_pieces(board: Board = DEFAULT_BOARD) -> list[Piece]:
    """The 32-piece starting position."""
    return pieces_from_tile_map(STARTING_TILE_MAP, board)
