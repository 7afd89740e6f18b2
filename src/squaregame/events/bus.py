from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
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
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                  # payload: dt=float (frame time from the view loop)
EVENT_CLOCK_SECOND = "clock_second"  # payload: game_id=int


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"    # payload: x, y, button
EVENT_TILE_TAP = "tile_tap"          # payload: tile_id=int


# ============================================================================
# SELECTION & MATCHING
# ============================================================================
EVENT_TILE_REVEALED = "tile_revealed"        # payload: tile_id=int
EVENT_TILE_TAP_IGNORED = "tile_tap_ignored"  # payload: tile_id, reason=str
EVENT_PAIR_READY = "pair_ready"              # payload: first_id=int, second_id=int
EVENT_PAIR_EVALUATED = "pair_evaluated"      # payload: result=MatchResult, first_id, second_id, generation=int
EVENT_REVEAL_REVERTED = "reveal_reverted"    # payload: tile_ids=list[int], generation=int


# ============================================================================
# BOARD
# ============================================================================
EVENT_GRID_GENERATED = "grid_generated"      # payload: tile_ids=list[int], tile_count=int, generation=int, reason=str
EVENT_BOARD_REFILLED = "board_refilled"      # payload: tile_count=int, generation=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"          # payload: game_id=int, tile_count=int
EVENT_SCORE_CHANGED = "score_changed"        # payload: score=int, delta=int, reason=str
EVENT_ROUND_COMPLETED = "round_completed"    # payload: record=RoundRecord, reason=str
EVENT_LEVEL_ADVANCED = "level_advanced"      # payload: level=int, tile_count=int
EVENT_GAME_OVER = "game_over"                # payload: reason=str, score=int, level=int
EVENT_STATE_CHANGED = "state_changed"        # payload: snapshot=GameSnapshot
