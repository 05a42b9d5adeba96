"""GameController - the orchestrator of a two-player game.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tilechess.core.enums import Color, GameStatus
from tilechess.core.move_generator import legal_destinations
from tilechess.core.piece import Piece
from tilechess.core.rules import apply_move, king_in_check
from tilechess.core.types import CellPosition
from tilechess.game.interfaces import GamePhase, MoveRejection
from tilechess.game.settings import GameSettings
from tilechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CaptureCallback = Callable[[Piece], None]
StatusCallback = Callable[[Color, GameStatus], None]
GameOverCallback = Callable[[Color | None], None]  # winner, None on stalemate
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_status: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game: highlights destinations, validates and commits
    moves, switches turns, notifies listeners.

    Legality is two-phase: the generator proposes pseudo-legal destinations,
    and :meth:`submit_move` rejects any that leave the mover's king in check.
    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "_settings", "last_rejection", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._settings = GameSettings()
        self.last_rejection = MoveRejection.NONE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()
        self._state = GameState()
        self._state.setup(self._settings)
        self.last_rejection = MoveRejection.NONE
        self._after_position_change()

    def save(self) -> str:
        """Current position as tile-map text."""
        return self._state.save()

    def load(self, tile_map: str, side_to_move: Color = Color.WHITE) -> None:
        """Restore a position saved with :meth:`save`."""
        self._state.load(tile_map, side_to_move)
        self.last_rejection = MoveRejection.NONE
        self._after_position_change()

    # ── Moves ────────────────────────────────────────────────────────────

    def select(self, cell: CellPosition) -> list[CellPosition]:
        """Destinations to highlight for the side-to-move's piece on *cell*."""
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return []
        piece = state.piece_at(cell)
        if piece is None or piece.color != state.side_to_move:
            return []
        return legal_destinations(piece, state.board, state.pieces)

    def submit_move(self, from_cell: CellPosition, to_cell: CellPosition) -> bool:
        state = self._state
        if state.phase == GamePhase.NOT_STARTED:
            return self._reject(MoveRejection.NOT_STARTED, from_cell, to_cell)
        if state.is_game_over:
            return self._reject(MoveRejection.GAME_OVER, from_cell, to_cell)

        piece = state.piece_at(from_cell)
        if piece is None:
            return self._reject(MoveRejection.NO_PIECE, from_cell, to_cell)
        if piece.color != state.side_to_move:
            return self._reject(MoveRejection.NOT_YOUR_TURN, from_cell, to_cell)
        if to_cell not in legal_destinations(piece, state.board, state.pieces):
            return self._reject(MoveRejection.UNREACHABLE, from_cell, to_cell)

        # Check-safety filter on the simulated position
        captured, pieces_after = apply_move(state.pieces, to_cell, piece)
        if king_in_check(piece.color, pieces_after, state.board):
            return self._reject(MoveRejection.KING_EXPOSED, from_cell, to_cell)

        record = state.commit(piece, to_cell, captured, pieces_after)
        self.last_rejection = MoveRejection.NONE

        # Notify listeners
        if captured is not None:
            self._emit_capture(captured)
        self._emit_move(record)
        opponent = piece.color.opposite
        self._log_status(opponent, record.opponent_status)
        self._emit_status(opponent, record.opponent_status)

        if state.is_game_over:
            self._emit_game_over(state.winner)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(
        self, reason: MoveRejection, from_cell: CellPosition, to_cell: CellPosition
    ) -> bool:
        self.last_rejection = reason
        _LOGGER.debug("Move %s -> %s rejected: %s", from_cell, to_cell, reason.name)
        return False

    def _after_position_change(self) -> None:
        state = self._state
        for color, status in state.status.items():
            self._log_status(color, status)
        if state.is_game_over:
            self._emit_game_over(state.winner)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)

    @staticmethod
    def _log_status(color: Color, status: GameStatus) -> None:
        if status == GameStatus.MATE:
            _LOGGER.warning("King mate state: %s", color)
        elif status == GameStatus.CHECK:
            _LOGGER.info("King check state: %s", color)
        elif status == GameStatus.STALEMATE:
            _LOGGER.info("King stalemate state: %s", color)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_capture(self, piece: Piece) -> None:
        for cb in self.events.on_capture:
            cb(piece)

    def _emit_status(self, color: Color, status: GameStatus) -> None:
        for cb in self.events.on_status:
            cb(color, status)

    def _emit_game_over(self, winner: Color | None) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
