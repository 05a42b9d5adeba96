"""High-level chess rules: attacks, check, move simulation, mate."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tilechess.core.board import Board
from tilechess.core.enums import Color, GameStatus
from tilechess.core.move_generator import MoveGenerator, find_king
from tilechess.core.piece import Piece
from tilechess.core.types import CellPosition


def cell_is_attacked(
    defending_color: Color,
    cell: CellPosition,
    all_pieces: Iterable[Piece],
    board: Board,
) -> bool:
    """Whether any piece opposing *defending_color* can move onto *cell*."""
    return MoveGenerator(board, all_pieces).is_cell_attacked(defending_color, cell)


def king_in_check(color: Color, all_pieces: Iterable[Piece], board: Board) -> bool:
    """Is *color*'s king attacked?  ``False`` when the king is absent."""
    return MoveGenerator(board, all_pieces).is_in_check(color)


def apply_move(
    all_pieces: Iterable[Piece],
    destination: CellPosition,
    moving_piece: Piece,
) -> tuple[Piece | None, list[Piece]]:
    """Simulate *moving_piece* going to *destination*.

    Returns the captured piece (if any) and a new snapshot; *all_pieces* is
    left untouched.
    """
    captured: Piece | None = None
    result: list[Piece] = []
    for piece in all_pieces:
        if piece.position == destination and piece != moving_piece:
            captured = piece
            continue
        if piece.position == moving_piece.position:
            continue
        result.append(piece)
    result.append(moving_piece.moved_to(destination))
    return captured, result


def is_move_safe(
    moving_piece: Piece,
    destination: CellPosition,
    all_pieces: Iterable[Piece],
    board: Board,
) -> bool:
    """Whether the move leaves the mover's own king out of check."""
    _, after = apply_move(all_pieces, destination, moving_piece)
    return not king_in_check(moving_piece.color, after, board)


def has_escape(color: Color, all_pieces: Sequence[Piece], board: Board) -> bool:
    """Whether some move by *color* leaves its king out of check."""
    gen = MoveGenerator(board, all_pieces)
    for piece in gen.pieces:
        if piece.color != color:
            continue
        for destination in gen.legal_destinations(piece):
            _, after = apply_move(gen.pieces, destination, piece)
            if not king_in_check(color, after, board):
                return True
    return False


def king_is_mated(color: Color, all_pieces: Sequence[Piece], board: Board) -> bool:
    """No move by *color* gets its king out of check.

    Does not test for check first: a side with no safe move at all is
    reported as mated, callers pair this with :func:`king_in_check`.
    """
    return not has_escape(color, all_pieces, board)


def is_stalemate(color: Color, all_pieces: Sequence[Piece], board: Board) -> bool:
    return side_status(color, all_pieces, board) == GameStatus.STALEMATE


def side_status(color: Color, all_pieces: Sequence[Piece], board: Board) -> GameStatus:
    """Check / mate / stalemate status of *color* in this snapshot."""
    in_check = king_in_check(color, all_pieces, board)
    escape = has_escape(color, all_pieces, board)
    if in_check:
        return GameStatus.CHECK if escape else GameStatus.MATE
    if not escape and find_king(color, all_pieces) is not None:
        return GameStatus.STALEMATE
    return GameStatus.NONE
