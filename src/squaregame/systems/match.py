from enum import Enum

from esper import World

from squaregame.components.tile import Tile
from squaregame.events.bus import EventBus, EVENT_PAIR_READY, EVENT_PAIR_EVALUATED
from squaregame.utils.game_state import find_tile, get_game_state


class MatchResult(Enum):
    MATCHED = "matched"
    MISMATCHED = "mismatched"


def evaluate(first: Tile, second: Tile) -> MatchResult:
    """Exact color equality; symmetric and independent of reveal state."""
    if first.color == second.color:
        return MatchResult.MATCHED
    return MatchResult.MISMATCHED


class MatchSystem:
    """Evaluates a revealed pair and applies the tile flag delta.

    A match marks both tiles matched and leaves them face up. A mismatch leaves both
    face up; turning them back down is scheduled by the controller according to the
    configured mismatch policy.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_PAIR_READY, self.on_pair_ready)

    def on_pair_ready(self, sender, **kwargs):
        first_id = kwargs.get('first_id')
        second_id = kwargs.get('second_id')
        if first_id is None or second_id is None:
            return
        first = find_tile(self.world, first_id)
        second = find_tile(self.world, second_id)
        if first is None or second is None:
            return
        result = self.resolve(first[1], second[1])
        self.event_bus.emit(
            EVENT_PAIR_EVALUATED,
            result=result,
            first_id=first_id,
            second_id=second_id,
            generation=get_game_state(self.world).generation,
        )

    @staticmethod
    def resolve(first: Tile, second: Tile) -> MatchResult:
        result = evaluate(first, second)
        if result is MatchResult.MATCHED:
            first.matched = True
            second.matched = True
            first.revealed = True
            second.revealed = True
        return result
