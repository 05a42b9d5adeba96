"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.tilemap import starting_pieces


@pytest.fixture
def board() -> Board:
    """The standard 8×8 board."""
    return Board()


@pytest.fixture
def start_pieces() -> list[Piece]:
    return starting_pieces()


@pytest.fixture
def rook_mate_pieces() -> list[Piece]:
    """Two white rooks on ranks 7 and 6 trapping the black king on (5, 7)."""
    return [
        Piece.at(0, 7, Color.WHITE, PieceType.ROOK),
        Piece.at(0, 6, Color.WHITE, PieceType.ROOK),
        Piece.at(5, 7, Color.BLACK, PieceType.KING),
    ]
