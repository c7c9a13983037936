"""Public face of the board engine.

A :class:`Game` wraps an esper world holding the 8x8 board and its counters.
Consumers create one with :func:`new_game`, play it through
:meth:`Game.make_move`, and explore hypothetical futures on :meth:`Game.clone`
copies so the canonical game is never disturbed.
"""
from __future__ import annotations

import random
import sys
from typing import IO, Tuple

from esper import World

from bejeweled.ai.simulation import clone_world_state
from bejeweled.events.bus import EventBus
from bejeweled.systems.board import BoardSystem
from bejeweled.systems.board_ops import Grid, grid_rows
from bejeweled.systems.moves import Move
from bejeweled.world import create_world, get_scoreboard

RULE = "-" * 17


class Game:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.board_system = BoardSystem(world, event_bus)

    @property
    def moves(self) -> int:
        return get_scoreboard(self.world).moves

    @property
    def score(self) -> int:
        return get_scoreboard(self.world).score

    @property
    def grid(self) -> Grid:
        return grid_rows(self.world)

    def make_move(self, move: Move) -> None:
        """Play move. Invalid moves are ignored; non-scoring moves are undone but counted."""
        self.board_system.make_move(move)

    def clone(self) -> "Game":
        state = clone_world_state(self.world)
        return Game(state.world, state.event_bus)

    def __deepcopy__(self, memo) -> "Game":
        return self.clone()

    def state_key(self) -> Tuple[int, int, Grid]:
        """Hashable snapshot of everything that defines the game."""
        return self.moves, self.score, self.grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.state_key() == other.state_key()

    def board_text(self) -> str:
        lines = [RULE, f"{self.moves:<8}{self.score:>9}", RULE]
        for row in self.grid:
            lines.append("".join(f"|{color.letter}" for color in row) + "|")
        lines.append(RULE)
        return "\n".join(lines)

    def print_board(self, file: IO[str] | None = None) -> None:
        print(self.board_text(), file=file or sys.stdout)

    def __repr__(self) -> str:
        return f"Game(moves={self.moves}, score={self.score})"


def new_game(
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    event_bus: EventBus | None = None,
) -> Game:
    """Create a game on a random board with every initial match already cleared."""
    if rng is None and seed is not None:
        rng = random.Random(seed)
    bus = event_bus or EventBus()
    world = create_world(rng=rng)
    game = Game(world, bus)
    game.board_system.stabilize()
    return game
