from __future__ import annotations

from esper import World

from squaregame import constants
from squaregame.events.bus import EventBus, EVENT_TICK, EVENT_CLOCK_SECOND


class TimerSystem:
    """Periodic one-second clock feeding the round controller.

    Frame time arrives through EVENT_TICK and is accumulated; every whole period
    while running emits EVENT_CLOCK_SECOND tagged with the game id the clock was
    started for. ``cancel`` drops any accumulated time, so nothing fires after it.
    """

    def __init__(self, world: World, event_bus: EventBus, *, period: float = constants.CLOCK_PERIOD):
        self.world = world
        self.event_bus = event_bus
        self.period = period
        self._game_id: int | None = None
        self._running = False
        self._elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def game_id(self) -> int | None:
        return self._game_id

    def start(self, game_id: int) -> None:
        self._game_id = game_id
        self._elapsed = 0.0
        self._running = True

    def pause(self) -> None:
        self._running = False

    def resume(self) -> None:
        if self._game_id is not None:
            self._running = True

    def cancel(self) -> None:
        self._running = False
        self._game_id = None
        self._elapsed = 0.0

    def fire(self) -> bool:
        """Emit one clock second immediately; no-op when stopped."""
        if not self._running or self._game_id is None:
            return False
        self.event_bus.emit(EVENT_CLOCK_SECOND, game_id=self._game_id)
        return True

    def on_tick(self, sender, **kwargs):
        if not self._running:
            return
        dt = kwargs.get('dt', 0.0)
        try:
            self._elapsed += float(dt)
        except (TypeError, ValueError):
            return
        while self._running and self._elapsed >= self.period:
            self._elapsed -= self.period
            self.fire()
