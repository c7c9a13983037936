"""Piece colors and the uniform random generator used to spawn them."""
from __future__ import annotations

import random
from enum import Enum


class Color(Enum):
    """The six piece colors. Only equality is meaningful."""
    BLUE = "B"
    GREEN = "G"
    ORANGE = "O"
    PURPLE = "P"
    RED = "R"
    WHITE = "W"

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> "Color":
        return cls(letter.upper())

    def __str__(self) -> str:
        return self.value


COLORS = tuple(Color)


def random_color(rng: random.Random) -> Color:
    """Draw one color with uniform probability."""
    return rng.choice(COLORS)
