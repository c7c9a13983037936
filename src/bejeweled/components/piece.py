from dataclasses import dataclass

from bejeweled.components.color import Color

@dataclass(slots=True)
class Piece:
    """Per-tile color assignment.

    Swaps and gravity exchange Piece colors between tile entities; the entities
    themselves keep their BoardPosition for the lifetime of the world.
    """
    color: Color
