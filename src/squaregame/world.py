import random

from esper import World

from squaregame.components.game_state import GameState
from squaregame.components.palette import Palette
from squaregame.components.round_history import RoundHistory
from squaregame.components.selection import Selection
from squaregame.config import GameConfig


def create_world(
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())

    # Session singletons: state, selection buffer and round log.
    world.create_entity(GameState(), Selection(), RoundHistory())

    # Single registry entity with the canonical colors.
    world.create_entity(Palette(colors=dict(config.palette)))
    return world
