from __future__ import annotations

from typing import List, Sequence

from bejeweled.components.color import Color
from bejeweled.game import Game
from bejeweled.systems.board_ops import set_color

ORDER = "BGOPRW"


def base_letters() -> List[List[str]]:
    """8x8 layout in which no two orthogonal neighbours share a color."""
    return [[ORDER[(2 * r + c) % 6] for c in range(8)] for r in range(8)]


def paint_grid(game: Game, letters: Sequence[Sequence[str]]) -> None:
    """Overwrite every piece color on the game's board."""
    for r, row in enumerate(letters):
        for c, letter in enumerate(row):
            assert set_color(game.world, r, c, Color.from_letter(letter))


def grid_letters(game: Game) -> List[str]:
    return ["".join(color.letter for color in row) for row in game.grid]
