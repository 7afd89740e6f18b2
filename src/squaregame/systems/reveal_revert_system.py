from typing import Iterable, List

from esper import World

from squaregame.components.pending_revert import PendingRevert
from squaregame.events.bus import EventBus, EVENT_TICK, EVENT_REVEAL_REVERTED
from squaregame.utils.game_state import get_game_state, tiles_by_id


class RevealRevertSystem:
    """Counts down pending reverts and turns mismatched pairs face down.

    Each revert is its own entity keyed by the board generation it was scheduled
    for. Once the grid has been regenerated the generation no longer matches and
    the revert is discarded without touching any tile.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def schedule(self, tile_ids: Iterable[int], generation: int, delay: float) -> int:
        return self.world.create_entity(
            PendingRevert(tile_ids=tuple(tile_ids), remaining=max(0.0, float(delay)), generation=generation)
        )

    def pending(self) -> List[PendingRevert]:
        return [revert for _, revert in self.world.get_component(PendingRevert)]

    def cancel_all(self) -> None:
        for entity in [ent for ent, _ in self.world.get_component(PendingRevert)]:
            self.world.delete_entity(entity, immediate=True)

    def on_tick(self, sender, **kwargs):
        self.advance(kwargs.get('dt', 0.0))

    def advance(self, dt: float) -> None:
        """Count every pending revert down by ``dt`` seconds and apply the due ones."""
        due = []
        for entity, revert in list(self.world.get_component(PendingRevert)):
            revert.remaining -= dt
            if revert.remaining <= 0.0:
                due.append((entity, revert))
        for entity, revert in due:
            self.world.delete_entity(entity, immediate=True)
            self._apply(revert)

    def _apply(self, revert: PendingRevert) -> None:
        if revert.generation != get_game_state(self.world).generation:
            return
        reverted = []
        for tile in tiles_by_id(self.world, revert.tile_ids):
            if tile.matched:
                continue
            tile.revealed = False
            reverted.append(tile.tile_id)
        if reverted:
            self.event_bus.emit(EVENT_REVEAL_REVERTED, tile_ids=reverted, generation=revert.generation)
