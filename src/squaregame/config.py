"""Tunable session rules for the round/level controller."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from squaregame import constants
from squaregame.errors import ConfigurationError


class MismatchPolicy(Enum):
    """What a mismatched pair does to the running round."""
    REVERT_AND_CONTINUE = "revert_and_continue"
    END_ROUND_ON_MISMATCH = "end_round_on_mismatch"


class TimeoutPolicy(Enum):
    """Where the controller lands when the level timer reaches zero."""
    END_GAME = "end_game"
    END_ROUND = "end_round"


@dataclass
class GameConfig:
    time_budget: int = constants.TIME_BUDGET
    match_unit_value: int = constants.MATCH_UNIT_VALUE
    match_goal: int = constants.MATCH_GOAL
    bonus_threshold: int = constants.BONUS_THRESHOLD
    level_time_extension: int = constants.LEVEL_TIME_EXTENSION
    start_tile_count: int = constants.START_TILE_COUNT
    tile_count_step: int = constants.TILE_COUNT_STEP
    max_tile_count: int = constants.MAX_TILE_COUNT
    mismatch_reveal_delay: float = constants.MISMATCH_REVEAL_DELAY
    mismatch_policy: MismatchPolicy = MismatchPolicy.REVERT_AND_CONTINUE
    timeout_policy: TimeoutPolicy = TimeoutPolicy.END_GAME
    # Stop in ROUND_COMPLETE after each cleared level until continue_play() is called.
    pause_between_levels: bool = False
    palette: Dict[str, Tuple[int, int, int]] = field(
        default_factory=lambda: dict(constants.DEFAULT_PALETTE)
    )

    def validate(self) -> "GameConfig":
        if self.time_budget <= 0:
            raise ConfigurationError(f"time_budget must be positive, got {self.time_budget}")
        if self.match_goal <= 0:
            raise ConfigurationError(f"match_goal must be positive, got {self.match_goal}")
        if self.match_unit_value < 0:
            raise ConfigurationError("match_unit_value must not be negative")
        if self.bonus_threshold < 0:
            raise ConfigurationError("bonus_threshold must not be negative")
        if self.level_time_extension < 0:
            raise ConfigurationError("level_time_extension must not be negative")
        if self.start_tile_count < 2:
            raise ConfigurationError(f"start_tile_count must be at least 2, got {self.start_tile_count}")
        if self.tile_count_step < 0:
            raise ConfigurationError("tile_count_step must not be negative")
        if self.max_tile_count < self.start_tile_count:
            raise ConfigurationError("max_tile_count must not be below start_tile_count")
        if self.mismatch_reveal_delay < 0:
            raise ConfigurationError("mismatch_reveal_delay must not be negative")
        required = math.ceil(self.start_tile_count / 2)
        if len(self.palette) < required:
            raise ConfigurationError(
                f"palette has {len(self.palette)} colors, {required} needed for "
                f"{self.start_tile_count} tiles"
            )
        return self

    def tile_count_for_level(self, level: int) -> int:
        """Grid size for ``level``, capped by max_tile_count and what the palette can pair."""
        count = self.start_tile_count + (max(1, level) - 1) * self.tile_count_step
        return min(count, self.max_tile_count, 2 * len(self.palette))
