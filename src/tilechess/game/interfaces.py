"""Game-layer enumerations shared by state and controller."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class MoveRejection(IntEnum):
    """Why :meth:`GameController.submit_move` refused a move."""

    NONE = 0
    NOT_STARTED = auto()
    GAME_OVER = auto()
    NO_PIECE = auto()
    NOT_YOUR_TURN = auto()
    UNREACHABLE = auto()  # not among the piece's destinations
    KING_EXPOSED = auto()  # would leave the mover's own king in check
