from __future__ import annotations

import random
from copy import deepcopy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Tuple

from esper import World

from bejeweled.components.board import Board
from bejeweled.components.board_position import BoardPosition
from bejeweled.components.piece import Piece
from bejeweled.components.scoreboard import Scoreboard
from bejeweled.events.bus import EventBus
from bejeweled.systems.moves import Move
from bejeweled.world import get_rng

if TYPE_CHECKING:
    from bejeweled.game import Game

DEFAULT_COMPONENTS: Tuple[type, ...] = (
    Board,
    Scoreboard,
    BoardPosition,
    Piece,
)


@dataclass(slots=True)
class CloneState:
    """Container for cloned simulation state."""

    world: World
    event_bus: EventBus
    entity_map: Dict[int, int]


def clone_world_state(world: World, components: Iterable[type] | None = None) -> CloneState:
    """Create an independent copy of a board world.

    A fresh ``EventBus`` is created for the clone so that exploratory moves stay
    invisible to the live game's observers. The clone's random generator starts
    from the original's current state.
    """

    comps = tuple(components) if components is not None else DEFAULT_COMPONENTS
    clone = World()
    rng = random.Random()
    rng.setstate(get_rng(world).getstate())
    setattr(clone, "random", rng)
    entity_map: Dict[int, int] = {}
    relevant_entities: set[int] = set()
    for comp_type in comps:
        for ent, _ in world.get_component(comp_type):
            relevant_entities.add(ent)
    for ent in sorted(relevant_entities):
        entity_map[ent] = clone.create_entity()
    for comp_type in comps:
        for ent, comp in world.get_component(comp_type):
            clone.add_component(entity_map[ent], deepcopy(comp))
    return CloneState(world=clone, event_bus=EventBus(), entity_map=entity_map)


def probe_move(game: "Game", move: Move) -> int:
    """Points the move would earn, measured on a throwaway clone of game."""
    trial = game.clone()
    before = trial.score
    trial.make_move(move)
    return trial.score - before
