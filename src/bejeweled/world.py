import random
from typing import Dict, Tuple

from esper import World

from bejeweled.components.board import Board
from bejeweled.components.board_position import BoardPosition
from bejeweled.components.color import random_color
from bejeweled.components.piece import Piece
from bejeweled.components.scoreboard import Scoreboard
from bejeweled.constants import GRID_ROWS, GRID_COLS

Position = Tuple[int, int]


def create_world(*, rng: random.Random | None = None) -> World:
    """Build a world holding the board entity and one tile entity per cell.

    Tiles are filled with uniformly random colors, so the returned board usually
    contains matches; callers stabilize it before play begins.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(Board(rows=GRID_ROWS, cols=GRID_COLS), Scoreboard())
    for r in range(GRID_ROWS):
        for c in range(GRID_COLS):
            world.create_entity(BoardPosition(row=r, col=c), Piece(color=random_color(world.random)))
    return world


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_scoreboard(world: World) -> Scoreboard:
    for _, scoreboard in world.get_component(Scoreboard):
        return scoreboard
    raise RuntimeError("Scoreboard component not found")


def get_rng(world: World) -> random.Random:
    rng = getattr(world, "random", None)
    if isinstance(rng, random.Random):
        return rng
    rng = random.Random()
    setattr(world, "random", rng)
    return rng


def tile_index(world: World) -> Dict[Position, int]:
    """Return the (row, col) -> tile entity mapping, building it on first use.

    Tile entities keep their BoardPosition for the lifetime of the world, so the
    mapping is cached on the world object.
    """
    index = getattr(world, "tile_index", None)
    if index is None:
        index = {(pos.row, pos.col): ent for ent, pos in world.get_component(BoardPosition)}
        setattr(world, "tile_index", index)
    return index
