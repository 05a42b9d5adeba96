"""Game management layer - controller, state, settings, storage.

Quick start::

    from tilechess.core import parse_cell
    from tilechess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(parse_cell("e2"), parse_cell("e4"))
"""

from tilechess.game.controller import GameController, GameEvents
from tilechess.game.interfaces import GamePhase, MoveRejection
from tilechess.game.settings import GameSettings
from tilechess.game.state import GameState, MoveRecord
from tilechess.game.storage import load_tile_map, save_tile_map

__all__ = [
    # Enums
    "GamePhase",
    "MoveRejection",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
    # Storage
    "load_tile_map",
    "save_tile_map",
]
