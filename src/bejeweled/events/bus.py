from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps lambdas and bound methods of short-lived observers alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# MOVES
# ============================================================================
EVENT_MOVE_REJECTED = "move_rejected"      # payload: move=Move
EVENT_MOVE_APPLIED = "move_applied"        # payload: move=Move, points=int
EVENT_MOVE_REVERTED = "move_reverted"      # payload: move=Move
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int, moves=int


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MATCH_FOUND = "match_found"                  # payload: positions=[(r,c),...], size=int, reason=str
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),...], points=int, depth=int
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c),...]
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, positions=[(r,c),...], points=int, reason=str
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int, total=int, reason=str
