import logging

from esper import World

from bejeweled.constants import MIN_MATCH, SCORE_3, SCORE_4, SCORE_5, FOLLOWUP_BONUS
from bejeweled.events.bus import (EventBus, EVENT_MATCH_FOUND, EVENT_MATCH_CLEARED,
                                  EVENT_REFILL_COMPLETED, EVENT_CASCADE_STEP, EVENT_CASCADE_COMPLETE)
from bejeweled.systems.board_ops import clear_positions
from bejeweled.systems.match import find_pieces_to_remove
from bejeweled.world import get_rng

logger = logging.getLogger(__name__)


def score_for_pass(count: int, *, first_loop: bool) -> int:
    """Points for one pass, keyed on the total number of cells it removes.

    Simultaneous independent runs share a single tier: two triples (6 cells)
    score like one five-run.
    """
    if count < MIN_MATCH:
        return 0
    if count == 3:
        points = SCORE_3
    elif count == 4:
        points = SCORE_4
    else:
        points = SCORE_5
    if not first_loop:
        points += FOLLOWUP_BONUS
    return points


class MatchResolutionSystem:
    """Runs clear -> gravity -> refill -> rescan until the board is stable."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def resolve(self, first_loop: bool = True, *, reason: str = "swap") -> int:
        """Resolve passes until no run remains; return the points they earned."""
        total = 0
        depth = 0
        while True:
            points = self.resolve_pass(first_loop, depth=depth + 1, reason=reason)
            if not points:
                break
            depth += 1
            total += points
            first_loop = False
        if depth:
            logger.debug("cascade finished after %d pass(es), %d points (%s)", depth, total, reason)
            self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=depth, total=total, reason=reason)
        return total

    def resolve_pass(self, first_loop: bool, *, depth: int = 1, reason: str = "swap") -> int:
        """Clear the current matches once. Returns 0 when the board is already stable."""
        positions = find_pieces_to_remove(self.world)
        if len(positions) < MIN_MATCH:
            return 0
        points = score_for_pass(len(positions), first_loop=first_loop)
        logger.debug("pass %d removes %d cells for %d points", depth, len(positions), points)
        self.event_bus.emit(EVENT_MATCH_FOUND, positions=positions, size=len(positions), reason=reason)
        self.event_bus.emit(EVENT_CASCADE_STEP, depth=depth, positions=positions, points=points, reason=reason)
        # Row-ascending order matters: each collapse only disturbs rows above it.
        new_tiles = clear_positions(self.world, positions, get_rng(self.world))
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=positions, points=points, depth=depth)
        self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=new_tiles)
        return points
