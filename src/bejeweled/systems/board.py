import logging

from esper import World

from bejeweled.events.bus import (EventBus, EVENT_MOVE_REJECTED, EVENT_MOVE_APPLIED,
                                  EVENT_MOVE_REVERTED, EVENT_SCORE_CHANGED)
from bejeweled.systems.match_resolution import MatchResolutionSystem
from bejeweled.systems.moves import Move, execute_move, is_valid
from bejeweled.world import get_scoreboard

logger = logging.getLogger(__name__)


class BoardSystem:
    """Applies player moves: validate, swap speculatively, resolve, revert if nothing scored."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.resolution = MatchResolutionSystem(world, event_bus)

    def stabilize(self) -> None:
        """Clear matches left by random generation without touching the counters."""
        self.resolution.resolve(first_loop=True, reason="setup")
        scoreboard = get_scoreboard(self.world)
        scoreboard.moves = 0
        scoreboard.score = 0

    def make_move(self, move: Move) -> int:
        """Play a move and return the points it earned.

        Invalid moves are ignored. A valid move that clears nothing is swapped
        back but still counts toward the move total.
        """
        if not is_valid(move):
            logger.debug("rejected move %s", move)
            self.event_bus.emit(EVENT_MOVE_REJECTED, move=move)
            return 0
        scoreboard = get_scoreboard(self.world)
        scoreboard.moves += 1
        execute_move(self.world, move)
        points = self.resolution.resolve(first_loop=True, reason="swap")
        if points == 0:
            execute_move(self.world, move)
            self.event_bus.emit(EVENT_MOVE_REVERTED, move=move)
            return 0
        scoreboard.score += points
        self.event_bus.emit(EVENT_MOVE_APPLIED, move=move, points=points)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=scoreboard.score, delta=points, moves=scoreboard.moves)
        return points
