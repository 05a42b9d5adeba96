"""Tests for GameState - the pure data/logic layer."""

from tilechess.core.board import Board
from tilechess.core.enums import Color, GameStatus, PieceType
from tilechess.core.piece import Piece
from tilechess.core.tilemap import encode
from tilechess.core.types import CellPosition
from tilechess.game.interfaces import GamePhase
from tilechess.game.settings import GameSettings
from tilechess.game.state import GameState


def _stalemate_next() -> list[Piece]:
    # White queen (6, 3) -> (6, 5) leaves the black king without a move.
    return [
        Piece.at(7, 7, Color.BLACK, PieceType.KING),
        Piece.at(5, 5, Color.WHITE, PieceType.KING),
        Piece.at(6, 3, Color.WHITE, PieceType.QUEEN),
    ]


class TestSetup:
    def test_defaults(self) -> None:
        state = GameState()
        assert state.phase == GamePhase.NOT_STARTED
        state.setup()
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.side_to_move == Color.WHITE
        assert state.board == Board()
        assert state.status == {
            Color.WHITE: GameStatus.NONE,
            Color.BLACK: GameStatus.NONE,
        }
        assert state.captured == {Color.WHITE: [], Color.BLACK: []}

    def test_loaded_mate_is_game_over(self, rook_mate_pieces: list[Piece]) -> None:
        state = GameState()
        state.setup(GameSettings(tile_map=encode(rook_mate_pieces)))
        assert state.is_game_over
        assert state.winner == Color.WHITE

    def test_piece_at(self) -> None:
        state = GameState()
        state.setup()
        assert state.piece_at(CellPosition(3, 0)) == Piece.at(
            3, 0, Color.WHITE, PieceType.KING
        )
        assert state.piece_at(CellPosition(3, 3)) is None

    def test_save_matches_encode(self) -> None:
        state = GameState()
        state.setup()
        assert state.save() == encode(state.pieces)


class TestCommit:
    def test_turn_passes(self) -> None:
        state = GameState()
        state.setup()
        pawn = Piece.at(0, 1, Color.WHITE, PieceType.PAWN)
        after = [p for p in state.pieces if p != pawn]
        after.append(pawn.moved_to(CellPosition(0, 2)))
        record = state.commit(pawn, CellPosition(0, 2), None, after)
        assert state.side_to_move == Color.BLACK
        assert record.opponent_status == GameStatus.NONE
        assert state.pieces is after

    def test_stalemate_ignored_by_default(self) -> None:
        state = GameState()
        state.setup(GameSettings(tile_map=encode(_stalemate_next())))
        queen = Piece.at(6, 3, Color.WHITE, PieceType.QUEEN)
        target = CellPosition(6, 5)
        after = [p for p in state.pieces if p != queen] + [queen.moved_to(target)]
        record = state.commit(queen, target, None, after)
        assert record.opponent_status == GameStatus.STALEMATE
        assert state.phase == GamePhase.AWAITING_MOVE

    def test_stalemate_can_end_game(self) -> None:
        state = GameState()
        state.setup(
            GameSettings(tile_map=encode(_stalemate_next()), end_on_stalemate=True)
        )
        queen = Piece.at(6, 3, Color.WHITE, PieceType.QUEEN)
        target = CellPosition(6, 5)
        after = [p for p in state.pieces if p != queen] + [queen.moved_to(target)]
        state.commit(queen, target, None, after)
        assert state.is_game_over
        assert state.winner is None
