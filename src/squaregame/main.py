"""Entry point for the Squaregame memory prototype.

Sets up the game session, event bus, render/input systems and Arcade window.
"""
import logging
import sys

from arcade import Window, run, set_background_color, color, key

from squaregame.components.game_state import GameMode
from squaregame.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from squaregame.events.bus import EVENT_MOUSE_PRESS
from squaregame.session import GameSession
from squaregame.systems.input import InputSystem
from squaregame.systems.render import RenderSystem
from squaregame.utils.player_store import PlayerStore


class SquaregameWindow(Window):
    def __init__(self, player_name: str = "Player"):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Squaregame")
        self.set_update_rate(1/60)
        self.session = GameSession(
            store=PlayerStore(PlayerStore.default_directory()),
            player_name=player_name,
        )
        self.event_bus = self.session.event_bus
        self.render_system = RenderSystem(self.session.world, self.event_bus, self)
        self.input_system = InputSystem(self.session.world, self.event_bus, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.session.advance(delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        snapshot = self.session.snapshot()
        if symbol in (key.ENTER, key.RETURN, key.SPACE):
            if snapshot.mode == GameMode.ROUND_COMPLETE:
                self.session.continue_play()
            elif snapshot.mode in (GameMode.NOT_STARTED, GameMode.GAME_COMPLETE):
                self.session.start_game()
        elif symbol == key.R:
            self.session.restart()

    def on_close(self):
        self.session.close()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    player_name = sys.argv[1] if len(sys.argv) > 1 else "Player"
    window = SquaregameWindow(player_name)
    run()

if __name__ == "__main__":
    main()
