"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from tilechess.core import DEFAULT_BOARD, legal_destinations, starting_pieces

    pieces = starting_pieces()
    for piece in pieces:
        print(piece, legal_destinations(piece, DEFAULT_BOARD, pieces))
"""

from tilechess.core.board import DEFAULT_BOARD, Board
from tilechess.core.enums import Color, GameStatus, PieceType
from tilechess.core.move_generator import (
    MoveGenerator,
    diagonal_cells,
    legal_destinations,
    split_by_color,
)
from tilechess.core.piece import Piece
from tilechess.core.rules import (
    apply_move,
    cell_is_attacked,
    find_king,
    has_escape,
    is_move_safe,
    is_stalemate,
    king_in_check,
    king_is_mated,
    side_status,
)
from tilechess.core.tilemap import (
    STARTING_TILE_MAP,
    decode,
    encode,
    pieces_from_tile_map,
    starting_pieces,
)
from tilechess.core.types import CellPosition, cell_name, cell_shade, parse_cell

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "CellPosition",
    "cell_name",
    "cell_shade",
    "parse_cell",
    # Domain objects
    "Board",
    "DEFAULT_BOARD",
    "MoveGenerator",
    "Piece",
    # Move generation
    "diagonal_cells",
    "legal_destinations",
    "split_by_color",
    # Rules
    "apply_move",
    "cell_is_attacked",
    "find_king",
    "has_escape",
    "is_move_safe",
    "is_stalemate",
    "king_in_check",
    "king_is_mated",
    "side_status",
    # Tile map
    "STARTING_TILE_MAP",
    "decode",
    "encode",
    "pieces_from_tile_map",
    "starting_pieces",
]
