from __future__ import annotations

import logging

from esper import World

from squaregame.components.player import Player
from squaregame.events.bus import EVENT_GAME_OVER, EVENT_ROUND_COMPLETED, EventBus
from squaregame.utils.game_state import get_round_history
from squaregame.utils.player_store import PlayerData, PlayerStore

logger = logging.getLogger(__name__)


class HistorySystem:
    """Keeps the player's round history in sync with the on-disk store.

    The stored history is loaded into the RoundHistory component once, so round
    indices continue across sessions. Every completed round and every game over
    writes the full history back.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: PlayerStore,
        player_name: str,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.store = store
        self._player_entity = self._ensure_player(player_name)

        self.event_bus.subscribe(EVENT_ROUND_COMPLETED, self._on_round_completed)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

        if load_existing:
            self.load()

    def _ensure_player(self, name: str) -> int:
        for entity, player in self.world.get_component(Player):
            player.name = name
            return entity
        return self.world.create_entity(Player(name=name))

    @property
    def player_name(self) -> str:
        return self.world.component_for_entity(self._player_entity, Player).name

    def player_data(self) -> PlayerData:
        return PlayerData(name=self.player_name, history=list(get_round_history(self.world).records))

    def load(self) -> PlayerData:
        data = self.store.load(self.player_name)
        get_round_history(self.world).replace(data.history)
        return data

    def save(self) -> bool:
        """Write the history; a failing disk is logged and never interrupts play."""
        try:
            self.store.save(self.player_data())
        except OSError as exc:
            logger.warning("Could not save history for %s: %s", self.player_name, exc)
            return False
        return True

    # Event handlers -----------------------------------------------------

    def _on_round_completed(self, sender, **payload) -> None:
        self.save()

    def _on_game_over(self, sender, **payload) -> None:
        self.save()
