from dataclasses import dataclass


@dataclass(slots=True)
class Scoreboard:
    """Move and score counters stored on the board entity."""

    moves: int = 0
    score: int = 0
