import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from esper import World

from squaregame.events.bus import (
    EventBus,
    EVENT_TILE_TAP,
    EVENT_TILE_REVEALED,
    EVENT_TILE_TAP_IGNORED,
    EVENT_PAIR_READY,
    EVENT_PAIR_EVALUATED,
)
from squaregame.utils.game_state import find_tile, get_game_state, get_selection

logger = logging.getLogger(__name__)


class SelectionKind(Enum):
    IGNORED = auto()
    FIRST_SELECTED = auto()
    PAIR_READY = auto()


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    kind: SelectionKind
    first_id: Optional[int] = None
    second_id: Optional[int] = None
    reason: Optional[str] = None


class SelectionSystem:
    """Turns tile taps into reveals and hands completed pairs to the match system.

    Taps on unknown, matched, revealed or filler tiles, and taps while the session
    is not accepting input, are ignored without touching any state. Tapping the tile
    already waiting in the buffer counts as a revealed-tile tap, so there is no toggle.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_TAP, self.on_tile_tap)
        self.event_bus.subscribe(EVENT_PAIR_EVALUATED, self.on_pair_evaluated)

    def on_tile_tap(self, sender, **kwargs):
        tile_id = kwargs.get('tile_id')
        if tile_id is None:
            return
        self.select(tile_id)

    def on_pair_evaluated(self, sender, **kwargs):
        get_selection(self.world).clear()

    def select(self, tile_id: int) -> SelectionOutcome:
        reason = self._reject_reason(tile_id)
        if reason is not None:
            logger.debug("Ignoring tap on tile %s: %s", tile_id, reason)
            self.event_bus.emit(EVENT_TILE_TAP_IGNORED, tile_id=tile_id, reason=reason)
            return SelectionOutcome(SelectionKind.IGNORED, reason=reason)
        _, tile = find_tile(self.world, tile_id)
        selection = get_selection(self.world)
        tile.revealed = True
        selection.tile_ids.append(tile_id)
        self.event_bus.emit(EVENT_TILE_REVEALED, tile_id=tile_id)
        if len(selection.tile_ids) < 2:
            return SelectionOutcome(SelectionKind.FIRST_SELECTED, first_id=tile_id)
        first_id, second_id = selection.tile_ids
        outcome = SelectionOutcome(SelectionKind.PAIR_READY, first_id=first_id, second_id=second_id)
        self.event_bus.emit(EVENT_PAIR_READY, first_id=first_id, second_id=second_id)
        return outcome

    def _reject_reason(self, tile_id: int) -> Optional[str]:
        if not get_game_state(self.world).accepts_input():
            return 'not_playing'
        found = find_tile(self.world, tile_id)
        if found is None:
            return 'unknown_tile'
        _, tile = found
        if tile.filler:
            return 'filler'
        if tile.matched:
            return 'matched'
        if tile.revealed:
            return 'revealed'
        if len(get_selection(self.world).tile_ids) >= 2:
            return 'buffer_full'
        return None
