from __future__ import annotations

from typing import Callable, Dict, List, Set, Tuple

from esper import World

from bejeweled.components.color import Color
from bejeweled.constants import GRID_ROWS, GRID_COLS, MIN_MATCH
from bejeweled.systems.board_ops import color_map

Position = Tuple[int, int]
Neighbours = Callable[[Position], List[Position]]


def row_neighbours(cell: Position) -> List[Position]:
    """Cells directly above and below, within the board."""
    row, col = cell
    cells: List[Position] = []
    if row < GRID_ROWS - 1:
        cells.append((row + 1, col))
    if row > 0:
        cells.append((row - 1, col))
    return cells


def col_neighbours(cell: Position) -> List[Position]:
    """Cells directly left and right, within the board."""
    row, col = cell
    cells: List[Position] = []
    if col < GRID_COLS - 1:
        cells.append((row, col + 1))
    if col > 0:
        cells.append((row, col - 1))
    return cells


def contiguous(colors: Dict[Position, Color], cell: Position, neighbours: Neighbours) -> Set[Position]:
    """Flood fill from cell through same-colored cells reachable via neighbours."""
    region: Set[Position] = {cell}
    visited: Set[Position] = set()
    stack: List[Position] = [cell]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        for nxt in neighbours(current):
            if nxt not in visited and colors[nxt] == colors[current]:
                region.add(nxt)
                stack.append(nxt)
    return region


def find_pieces_to_remove(world: World) -> List[Position]:
    """Collect every cell that belongs to a vertical or horizontal run of MIN_MATCH or more.

    The result is ordered by row, top first, which is the order gravity must
    process removals in.
    """
    colors = color_map(world)
    to_remove: Set[Position] = set()
    for r in range(GRID_ROWS):
        for c in range(GRID_COLS):
            for neighbours in (row_neighbours, col_neighbours):
                region = contiguous(colors, (r, c), neighbours)
                if len(region) >= MIN_MATCH:
                    to_remove |= region
    return sorted(to_remove)


def has_matches(world: World) -> bool:
    return bool(find_pieces_to_remove(world))
