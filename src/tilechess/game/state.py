"""Game state - the authoritative snapshot plus turn and check bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilechess.core.board import Board
from tilechess.core.enums import Color, GameStatus
from tilechess.core.piece import Piece
from tilechess.core.rules import side_status
from tilechess.core.tilemap import encode, pieces_from_tile_map
from tilechess.core.types import CellPosition
from tilechess.game.interfaces import GamePhase
from tilechess.game.settings import GameSettings


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Summary of one accepted move."""

    piece: Piece
    destination: CellPosition
    captured: Piece | None = None
    opponent_status: GameStatus = GameStatus.NONE


@dataclass
class GameState:
    """Manages the live position: pieces, turn, status, captured tray.

    This is a pure data/logic class - no threading, no UI.  Legality is
    checked by the controller before :meth:`commit` is called.
    """

    board: Board = field(default_factory=Board, init=False)
    pieces: list[Piece] = field(default_factory=list, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: dict[Color, GameStatus] = field(default_factory=dict, init=False)
    captured: dict[Color, list[Piece]] = field(default_factory=dict, init=False)
    winner: Color | None = field(default=None, init=False)
    end_on_stalemate: bool = field(default=False, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game."""
        settings = settings or GameSettings()
        self.board = settings.board
        self.end_on_stalemate = settings.end_on_stalemate
        self.load(settings.tile_map, settings.first_to_move)

    def load(self, tile_map: str, side_to_move: Color = Color.WHITE) -> None:
        """Replace the position with the one described by *tile_map*."""
        self.pieces = pieces_from_tile_map(tile_map, self.board)
        self.side_to_move = side_to_move
        self.captured = {Color.WHITE: [], Color.BLACK: []}
        self.winner = None
        self.phase = GamePhase.AWAITING_MOVE
        self.status = {
            color: side_status(color, self.pieces, self.board) for color in Color
        }
        self._check_game_over()

    def save(self) -> str:
        return encode(self.pieces, self.board)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def check_state(self) -> Color | None:
        """The side currently in (non-mate) check, if any."""
        for color, status in self.status.items():
            if status == GameStatus.CHECK:
                return color
        return None

    @property
    def mate_state(self) -> Color | None:
        """The mated side, if any."""
        for color, status in self.status.items():
            if status == GameStatus.MATE:
                return color
        return None

    def piece_at(self, cell: CellPosition) -> Piece | None:
        for piece in self.pieces:
            if piece.position == cell:
                return piece
        return None

    # ── Move application ─────────────────────────────────────────────────

    def commit(
        self,
        piece: Piece,
        destination: CellPosition,
        captured: Piece | None,
        pieces_after: list[Piece],
    ) -> MoveRecord:
        """Adopt *pieces_after* as the live snapshot and pass the turn."""
        self.pieces = pieces_after
        if captured is not None:
            self.captured[captured.color].append(captured)

        mover = piece.color
        opponent = mover.opposite
        self.status[mover] = GameStatus.NONE
        self.status[opponent] = side_status(opponent, self.pieces, self.board)
        self.next_move()
        self._check_game_over()

        return MoveRecord(
            piece=piece,
            destination=destination,
            captured=captured,
            opponent_status=self.status[opponent],
        )

    def next_move(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        for color, status in self.status.items():
            if status == GameStatus.MATE:
                self.winner = color.opposite
                self.phase = GamePhase.GAME_OVER
                return
            if status == GameStatus.STALEMATE and self.end_on_stalemate:
                if color == self.side_to_move:
                    self.winner = None
                    self.phase = GamePhase.GAME_OVER
                    return
