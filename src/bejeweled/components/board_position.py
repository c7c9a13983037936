from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Fixed grid coordinate of a tile entity. Tiles never move; their Piece does."""
    row: int
    col: int
