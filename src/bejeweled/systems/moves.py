from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from bejeweled.components.piece import Piece
from bejeweled.constants import GRID_ROWS, GRID_COLS
from bejeweled.world import tile_index

Position = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """Swap of the pieces at (row1, col1) and (row2, col2)."""

    row1: int
    col1: int
    row2: int
    col2: int

    @classmethod
    def between(cls, a: Position, b: Position) -> "Move":
        return cls(a[0], a[1], b[0], b[1])

    @property
    def cells(self) -> Tuple[Position, Position]:
        return (self.row1, self.col1), (self.row2, self.col2)

    def is_valid(self) -> bool:
        return is_valid(self)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS


def is_valid(move: Move) -> bool:
    """A move is valid if both cells are on the board and orthogonally adjacent."""
    if not (in_bounds(move.row1, move.col1) and in_bounds(move.row2, move.col2)):
        return False
    return (
        (move.row1 == move.row2 and abs(move.col1 - move.col2) == 1)
        or (move.col1 == move.col2 and abs(move.row1 - move.row2) == 1)
    )


def execute_move(world: World, move: Move) -> None:
    """Swap the colors of the two referenced cells, without any legality check."""
    index = tile_index(world)
    src: Piece = world.component_for_entity(index[(move.row1, move.col1)], Piece)
    dst: Piece = world.component_for_entity(index[(move.row2, move.col2)], Piece)
    src.color, dst.color = dst.color, src.color
