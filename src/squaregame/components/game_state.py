"""Game state resource describing the live session."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Controller states."""
    NOT_STARTED = auto()
    PLAYING = auto()
    ROUND_COMPLETE = auto()
    GAME_COMPLETE = auto()


@dataclass
class GameState:
    """Singleton component holding score, timer and level progression."""
    mode: GameMode = GameMode.NOT_STARTED
    score: int = 0
    time_remaining: int = 0
    level: int = 1
    matches_this_round: int = 0
    matches_total: int = 0
    round_over: bool = False
    game_over: bool = False
    grid_tile_count: int = 0
    # Bumped on every grid regeneration; deferred actions compare against it.
    generation: int = 0
    # Bumped on every start_game(); timer ticks carry it.
    game_id: int = 0
    message: str = ""

    def accepts_input(self) -> bool:
        return self.mode == GameMode.PLAYING and not self.round_over and not self.game_over
