"""Match-three board engine."""

from bejeweled.components.color import Color
from bejeweled.game import Game, new_game
from bejeweled.systems.moves import Move, is_valid

__all__ = [
    "Color",
    "Game",
    "Move",
    "is_valid",
    "new_game",
]
