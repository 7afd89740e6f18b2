"""Headless game session wiring every core system onto one world and event bus."""
from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, Iterator

from squaregame.config import GameConfig
from squaregame.events.bus import (
    EVENT_STATE_CHANGED,
    EVENT_TICK,
    EVENT_TILE_TAP,
    EventBus,
)
from squaregame.systems.board import BoardSystem
from squaregame.systems.game_flow_system import GameFlowSystem
from squaregame.systems.history_system import HistorySystem
from squaregame.systems.match import MatchSystem
from squaregame.systems.reveal_revert_system import RevealRevertSystem
from squaregame.systems.selection import SelectionSystem
from squaregame.systems.timer_system import TimerSystem
from squaregame.utils.player_store import PlayerData, PlayerStore
from squaregame.utils.snapshot import GameSnapshot
from squaregame.world import create_world


class GameSession:
    """One player's game: inputs are taps and clock ticks, output is a snapshot.

    All inputs run synchronously through the event bus, so every mutation of the
    world happens on the caller's thread in arrival order.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        id_source: Iterator[int] | None = None,
        store: PlayerStore | Path | str | None = None,
        player_name: str = "Player",
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.config, rng=rng)

        self.board_system = BoardSystem(self.world, self.event_bus, id_source=id_source)
        self.selection_system = SelectionSystem(self.world, self.event_bus)
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.revert_system = RevealRevertSystem(self.world, self.event_bus)
        self.timer_system = TimerSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            config=self.config,
            board_system=self.board_system,
            timer_system=self.timer_system,
            revert_system=self.revert_system,
        )
        self.history_system: HistorySystem | None = None
        if store is not None:
            if not isinstance(store, PlayerStore):
                store = PlayerStore(store)
            self.history_system = HistorySystem(
                self.world,
                self.event_bus,
                store=store,
                player_name=player_name,
            )

    # Inputs -------------------------------------------------------------

    def start_game(self) -> None:
        self.game_flow_system.start_game()

    def restart(self) -> None:
        self.game_flow_system.restart()

    def continue_play(self) -> bool:
        return self.game_flow_system.continue_play()

    def tap(self, tile_id: int) -> None:
        self.event_bus.emit(EVENT_TILE_TAP, tile_id=tile_id)

    def tick(self) -> bool:
        """Deliver one timer second to the controller and to the pending reveal reverts.

        Returns whether the clock was running. Callers driving the session with
        ``advance`` get both from frame time and should not call this as well.
        """
        fired = self.timer_system.fire()
        self.revert_system.advance(self.timer_system.period)
        return fired

    def advance(self, dt: float) -> None:
        """Feed frame time to the timer and the pending reveal reverts."""
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def close(self) -> None:
        self.timer_system.cancel()
        self.revert_system.cancel_all()

    # Outputs ------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return self.game_flow_system.snapshot()

    def player_data(self) -> PlayerData | None:
        if self.history_system is None:
            return None
        return self.history_system.player_data()

    def subscribe(self, listener: Callable[[GameSnapshot], None]) -> None:
        """Call ``listener`` with a fresh snapshot after every accepted state change."""
        self.event_bus.subscribe(
            EVENT_STATE_CHANGED,
            lambda sender, **payload: listener(payload["snapshot"]),
        )
