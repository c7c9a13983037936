from __future__ import annotations

import random
from typing import Dict, List, Tuple

from esper import World

from bejeweled.components.color import Color, random_color
from bejeweled.components.piece import Piece
from bejeweled.systems.moves import Move, execute_move
from bejeweled.world import get_board, tile_index

Position = Tuple[int, int]
Grid = Tuple[Tuple[Color, ...], ...]


def get_entity_at(world: World, row: int, col: int) -> int | None:
    return tile_index(world).get((row, col))


def color_at(world: World, row: int, col: int) -> Color | None:
    entity = get_entity_at(world, row, col)
    if entity is None:
        return None
    return world.component_for_entity(entity, Piece).color


def set_color(world: World, row: int, col: int, color: Color) -> bool:
    entity = get_entity_at(world, row, col)
    if entity is None:
        return False
    world.component_for_entity(entity, Piece).color = color
    return True


def color_map(world: World) -> Dict[Position, Color]:
    """Return mapping of every board position to its piece color."""
    return {
        pos: world.component_for_entity(entity, Piece).color
        for pos, entity in tile_index(world).items()
    }


def grid_rows(world: World) -> Grid:
    """Row-major, read-only snapshot of the board colors."""
    board = get_board(world)
    colors = color_map(world)
    return tuple(
        tuple(colors[(r, c)] for c in range(board.cols))
        for r in range(board.rows)
    )


def collapse_cell(world: World, row: int, col: int, rng: random.Random) -> Color:
    """Remove the piece at (row, col), drop the pieces above it one step, and refill row 0.

    The removed piece is bubbled to the top of its column through pairwise
    swaps, starting just above the removed row, then replaced with a fresh color.
    """
    for i in range(row):
        execute_move(world, Move(row - 1 - i, col, row - i, col))
    color = random_color(rng)
    set_color(world, 0, col, color)
    return color


def clear_positions(world: World, positions: List[Position], rng: random.Random) -> List[Position]:
    """Collapse each position in the given order; return the refilled top-row cells."""
    new_tiles: List[Position] = []
    for row, col in positions:
        collapse_cell(world, row, col, rng)
        new_tiles.append((0, col))
    return new_tiles
