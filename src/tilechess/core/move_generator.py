"""Pseudo-legal destination generation + attack detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.types import CellPosition

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

# (di, dj) per diagonal: top-right, top-left, down-right, down-left
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))

_PAWN_DIRECTION: tuple[int, int] = (1, -1)


def diagonal_cells(
    start: CellPosition, board: Board, di: int, dj: int
) -> Iterator[CellPosition]:
    """Lazily walk from *start* (exclusive) along ``(di, dj)`` to the board edge."""
    cell = start.offset(di, dj)
    while not board.is_out_of_range(cell):
        yield cell
        cell = cell.offset(di, dj)


def find_king(color: Color, pieces: Iterable[Piece]) -> Piece | None:
    """The first king of *color* in *pieces*, if any."""
    for piece in pieces:
        if piece.color == color and piece.kind == PieceType.KING:
            return piece
    return None


def split_by_color(
    color: Color, pieces: Iterable[Piece]
) -> tuple[set[CellPosition], set[CellPosition]]:
    """Cells occupied by *color* and by its opponent."""
    allies: set[CellPosition] = set()
    enemies: set[CellPosition] = set()
    for piece in pieces:
        if piece.color == color:
            allies.add(piece.position)
        else:
            enemies.add(piece.position)
    return allies, enemies


class MoveGenerator:
    """Generates destinations for pieces of one snapshot.

    The snapshot is copied on construction and never modified, so a
    generator is only valid for the position it was built from.
    """

    __slots__ = ("_board", "_pieces")

    def __init__(self, board: Board, pieces: Iterable[Piece]) -> None:
        self._board = board
        self._pieces: tuple[Piece, ...] = tuple(pieces)

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self._pieces

    # -- Public API ---------------------------------------------------------

    def legal_destinations(
        self, piece: Piece, *, skip_check: bool = False
    ) -> list[CellPosition]:
        """Pseudo-legal destinations of *piece*.

        Only the king filters out attacked cells; *skip_check* disables that
        filter so two kings never evaluate each other recursively.
        """
        allies, enemies = split_by_color(piece.color, self._pieces)
        kind = piece.kind

        if kind == PieceType.PAWN:
            return self._gen_pawn(piece, allies, enemies)
        if kind == PieceType.ROOK:
            return self._gen_rook(piece, allies, enemies)
        if kind == PieceType.BISHOP:
            return self._gen_bishop(piece, allies, enemies)
        if kind == PieceType.KNIGHT:
            return self._gen_knight(piece, allies)
        if kind == PieceType.QUEEN:
            return self._gen_queen(piece, allies, enemies)
        return self._gen_king(piece, allies, enemies, skip_check)

    # -- Attack detection (public) -----------------------------------------

    def is_cell_attacked(self, defending_color: Color, cell: CellPosition) -> bool:
        """Does any opponent of *defending_color* reach *cell*?"""
        for enemy in self._pieces:
            if enemy.color == defending_color:
                continue
            targets = self.legal_destinations(
                enemy, skip_check=enemy.kind == PieceType.KING
            )
            if cell in targets:
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked?  A missing king is never in check."""
        king = find_king(color, self._pieces)
        if king is None:
            return False
        return self.is_cell_attacked(color, king.position)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(
        self,
        piece: Piece,
        allies: set[CellPosition],
        enemies: set[CellPosition],
    ) -> list[CellPosition]:
        board = self._board
        pos = piece.position
        step = _PAWN_DIRECTION[int(piece.color)]
        if piece.color == Color.WHITE:
            start_rank = board.first_element + 1
        else:
            start_rank = board.last_element - 1

        def is_free(cell: CellPosition) -> bool:
            return (
                not board.is_out_of_range(cell)
                and cell not in allies
                and cell not in enemies
            )

        cells: list[CellPosition] = []
        one_step = pos.offset(0, step)
        if is_free(one_step):
            cells.append(one_step)
            two_step = pos.offset(0, 2 * step)
            if pos.j == start_rank and is_free(two_step):
                cells.append(two_step)

        for di in (1, -1):
            capture = pos.offset(di, step)
            if capture in enemies:
                cells.append(capture)
        return cells

    def _gen_rook(
        self,
        piece: Piece,
        allies: set[CellPosition],
        enemies: set[CellPosition],
    ) -> list[CellPosition]:
        board = self._board
        i, j = piece.position.i, piece.position.j
        rays = (
            (CellPosition(x, j) for x in range(i + 1, board.last_element + 1)),
            (CellPosition(x, j) for x in range(i - 1, board.first_element - 1, -1)),
            (CellPosition(i, y) for y in range(j - 1, board.first_element - 1, -1)),
            (CellPosition(i, y) for y in range(j + 1, board.last_element + 1)),
        )
        cells: list[CellPosition] = []
        for ray in rays:
            cells.extend(_walk_ray(ray, allies, enemies))
        return cells

    def _gen_bishop(
        self,
        piece: Piece,
        allies: set[CellPosition],
        enemies: set[CellPosition],
    ) -> list[CellPosition]:
        cells: list[CellPosition] = []
        for di, dj in BISHOP_DIRS:
            ray = diagonal_cells(piece.position, self._board, di, dj)
            cells.extend(_walk_ray(ray, allies, enemies))
        return cells

    def _gen_knight(
        self, piece: Piece, allies: set[CellPosition]
    ) -> list[CellPosition]:
        board = self._board
        cells: list[CellPosition] = []
        for di, dj in KNIGHT_OFFSETS:
            cell = piece.position.offset(di, dj)
            if not board.is_out_of_range(cell) and cell not in allies:
                cells.append(cell)
        return cells

    def _gen_queen(
        self,
        piece: Piece,
        allies: set[CellPosition],
        enemies: set[CellPosition],
    ) -> list[CellPosition]:
        return self._gen_rook(piece, allies, enemies) + self._gen_bishop(
            piece, allies, enemies
        )

    def _gen_king(
        self,
        piece: Piece,
        allies: set[CellPosition],
        enemies: set[CellPosition],
        skip_check: bool,
    ) -> list[CellPosition]:
        pos = piece.position
        near = [
            cell
            for cell in self._gen_queen(piece, allies, enemies)
            if abs(cell.i - pos.i) <= 1 and abs(cell.j - pos.j) <= 1
        ]
        if skip_check:
            return near
        return [cell for cell in near if not self.is_cell_attacked(piece.color, cell)]


def _walk_ray(
    ray: Iterable[CellPosition],
    allies: set[CellPosition],
    enemies: set[CellPosition],
) -> list[CellPosition]:
    cells: list[CellPosition] = []
    for cell in ray:
        if cell in allies:
            break
        cells.append(cell)
        if cell in enemies:
            break
    return cells


def legal_destinations(
    piece: Piece, board: Board, all_pieces: Iterable[Piece]
) -> list[CellPosition]:
    """Pseudo-legal destinations of *piece* within the *all_pieces* snapshot."""
    return MoveGenerator(board, all_pieces).legal_destinations(piece)
