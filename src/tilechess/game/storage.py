"""Tile-map file import/export."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tilechess.core.board import DEFAULT_BOARD, Board
from tilechess.core.piece import Piece
from tilechess.core.tilemap import encode, pieces_from_tile_map

_LOGGER = logging.getLogger(__name__)


def save_tile_map(
    file_path: Path, pieces: Iterable[Piece], board: Board = DEFAULT_BOARD
) -> None:
    """Write *pieces* to *file_path* as tile-map text."""
    file_path.write_text(encode(pieces, board), encoding="utf-8")
    _LOGGER.debug("Saved tile map to %s", file_path)


def load_tile_map(
    file_path: Path, board: Board = DEFAULT_BOARD, *, strict: bool = False
) -> list[Piece]:
    """Read a snapshot from a tile-map file."""
    text = file_path.read_text(encoding="utf-8")
    pieces = pieces_from_tile_map(text, board, strict=strict)
    _LOGGER.debug("Loaded %d pieces from %s", len(pieces), file_path)
    return pieces
