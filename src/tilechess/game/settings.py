"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilechess.core.board import Board
from tilechess.core.enums import Color
from tilechess.core.tilemap import STARTING_TILE_MAP


@dataclass
class GameSettings:
    """All configurable options of a game."""

    # Geometry
    board: Board = field(default_factory=Board)

    # Start position
    tile_map: str = STARTING_TILE_MAP
    first_to_move: Color = Color.WHITE

    # Rules
    end_on_stalemate: bool = False
