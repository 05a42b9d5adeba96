"""Tests for tile-map encoding / decoding."""

import logging

import pytest

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.tilemap import (
    STARTING_TILE_MAP,
    decode,
    encode,
    parse_token,
    piece_token,
    pieces_from_tile_map,
    starting_pieces,
)
from tilechess.core.types import CellPosition


class TestDecode:
    def test_starting_layout(self) -> None:
        result = decode(STARTING_TILE_MAP)
        assert len(result) == 64
        assert all(p is not None for p in result[0:16])
        assert all(p is None for p in result[16:48])
        assert all(p is not None for p in result[48:64])

    def test_index_matches_cell(self) -> None:
        result = decode(STARTING_TILE_MAP)
        for idx, piece in enumerate(result):
            if piece is not None:
                assert piece.position == CellPosition(idx % 8, idx // 8)

    def test_ranks_reversed(self) -> None:
        result = decode(STARTING_TILE_MAP)
        assert result[0] == Piece.at(0, 0, Color.WHITE, PieceType.ROOK)
        assert result[3] == Piece.at(3, 0, Color.WHITE, PieceType.KING)
        assert result[60] == Piece.at(4, 7, Color.BLACK, PieceType.QUEEN)

    def test_parse_token(self) -> None:
        piece = parse_token("w_bi", CellPosition(0, 1))
        assert piece == Piece.at(0, 1, Color.WHITE, PieceType.BISHOP)
        assert parse_token("none", CellPosition(0, 1)) is None

    def test_indented_text_and_blank_lines(self) -> None:
        text = "\n".join("        " + line + "\n" for line in STARTING_TILE_MAP.split())
        assert decode(text) == decode(STARTING_TILE_MAP)

    def test_unknown_token_is_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        text = STARTING_TILE_MAP.replace("|w_ro|w_kn|", "|w_xx|w_kn|", 1)
        with caplog.at_level(logging.DEBUG, logger="tilechess.core.tilemap"):
            result = decode(text)
        assert len(result) == 64
        assert result[0] is None
        assert "w_xx" in caplog.text

    def test_strict_rejects_unknown_token(self) -> None:
        text = STARTING_TILE_MAP.replace("b_qu", "b_zz")
        with pytest.raises(ValueError, match="b_zz"):
            decode(text, strict=True)

    def test_custom_board_offsets(self) -> None:
        board = Board(first_element=1, last_element=2)
        text = "|b_ki|none|\n|none|w_ki|\n"
        assert pieces_from_tile_map(text, board) == [
            Piece.at(2, 1, Color.WHITE, PieceType.KING),
            Piece.at(1, 2, Color.BLACK, PieceType.KING),
        ]


class TestEncode:
    def test_empty_board(self) -> None:
        lines = encode([]).splitlines()
        assert len(lines) == 8
        assert all(line == "|" + "none|" * 8 for line in lines)

    def test_starting_position_text(self, start_pieces: list[Piece]) -> None:
        assert encode(start_pieces) == STARTING_TILE_MAP

    def test_high_rank_first(self) -> None:
        pieces = [Piece.at(2, 7, Color.BLACK, PieceType.KNIGHT)]
        lines = encode(pieces).splitlines()
        assert lines[0] == "|none|none|b_kn|none|none|none|none|none|"

    def test_piece_tokens(self) -> None:
        assert piece_token(None) == "none"
        assert piece_token(Piece.at(0, 0, Color.BLACK, PieceType.QUEEN)) == "b_qu"
        assert piece_token(Piece.at(0, 0, Color.WHITE, PieceType.PAWN)) == "w_pa"


class TestRoundTrip:
    def test_starting_position(self, start_pieces: list[Piece]) -> None:
        decoded = [p for p in decode(encode(start_pieces)) if p is not None]
        assert set(decoded) == set(start_pieces)
        assert len(decoded) == 32

    def test_sparse_position(self, rook_mate_pieces: list[Piece]) -> None:
        assert set(pieces_from_tile_map(encode(rook_mate_pieces))) == set(
            rook_mate_pieces
        )

    def test_starting_pieces_counts(self) -> None:
        pieces = starting_pieces()
        assert sum(1 for p in pieces if p.color == Color.WHITE) == 16
        assert sum(1 for p in pieces if p.kind == PieceType.PAWN) == 16
        assert {p.position.j for p in pieces} == {0, 1, 6, 7}
