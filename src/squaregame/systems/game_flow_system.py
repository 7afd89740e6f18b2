"""Round and level controller.

Owns score, timer budget, match goal and the level counter, and drives the
NOT_STARTED -> PLAYING -> ROUND_COMPLETE -> (PLAYING | GAME_COMPLETE) machine.
Every mutating handler first checks that the session is PLAYING with neither the
round nor the game over; anything arriving outside that window is dropped.
"""
from __future__ import annotations

import logging

from esper import World

from squaregame.components.game_state import GameMode, GameState
from squaregame.components.round_history import RoundRecord
from squaregame.config import GameConfig, MismatchPolicy, TimeoutPolicy
from squaregame.events.bus import (
    EVENT_BOARD_REFILLED,
    EVENT_CLOCK_SECOND,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_LEVEL_ADVANCED,
    EVENT_PAIR_EVALUATED,
    EVENT_ROUND_COMPLETED,
    EVENT_SCORE_CHANGED,
    EVENT_STATE_CHANGED,
    EventBus,
)
from squaregame.systems.board import BoardSystem
from squaregame.systems.match import MatchResult
from squaregame.systems.reveal_revert_system import RevealRevertSystem
from squaregame.systems.timer_system import TimerSystem
from squaregame.utils.game_state import board_cleared, get_game_state, get_round_history
from squaregame.utils.snapshot import GameSnapshot, build_snapshot

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Central coordinator for round completion, level advance and game over."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: GameConfig,
        board_system: BoardSystem,
        timer_system: TimerSystem,
        revert_system: RevealRevertSystem,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config
        self.board_system = board_system
        self.timer_system = timer_system
        self.revert_system = revert_system
        # Why the last round stopped; decides what continue_play() does.
        self._round_end_reason: str | None = None

        self.event_bus.subscribe(EVENT_PAIR_EVALUATED, self._on_pair_evaluated)
        self.event_bus.subscribe(EVENT_CLOCK_SECOND, self._on_clock_second)

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_game(self) -> None:
        state = self.state
        self.timer_system.cancel()
        self.revert_system.cancel_all()
        state.game_id += 1
        state.score = 0
        state.level = 1
        state.matches_this_round = 0
        state.matches_total = 0
        state.round_over = False
        state.game_over = False
        self._round_end_reason = None
        tile_count = self.config.tile_count_for_level(1)
        self.board_system.spawn_grid(tile_count, reason="start")
        state.time_remaining = self.config.time_budget
        state.mode = GameMode.PLAYING
        state.message = "Find the pairs!"
        self.timer_system.start(state.game_id)
        logger.info("Game %s started with %s tiles", state.game_id, tile_count)
        self.event_bus.emit(EVENT_GAME_STARTED, game_id=state.game_id, tile_count=tile_count)
        self._publish()

    def restart(self) -> None:
        self.start_game()

    def continue_play(self) -> bool:
        """Leave ROUND_COMPLETE: advance after a cleared level, replay after a timeout."""
        state = self.state
        if state.mode != GameMode.ROUND_COMPLETE or state.game_over:
            return False
        if self._round_end_reason == "goal_reached":
            self._advance_level()
        else:
            self._replay_level()
        return True

    def snapshot(self) -> GameSnapshot:
        return build_snapshot(self.world, self.config.match_goal)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_pair_evaluated(self, sender, **payload) -> None:
        state = self.state
        if not state.accepts_input():
            return
        if payload.get("generation") != state.generation:
            return
        result = payload.get("result")
        if result is MatchResult.MATCHED:
            self._on_matched()
        elif result is MatchResult.MISMATCHED:
            self._on_mismatched(payload.get("first_id"), payload.get("second_id"))

    def _on_clock_second(self, sender, **payload) -> None:
        state = self.state
        if payload.get("game_id") != state.game_id:
            return
        if not state.accepts_input():
            return
        state.time_remaining = max(0, state.time_remaining - 1)
        if state.time_remaining == 0:
            self._on_timeout()
        self._publish()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _on_matched(self) -> None:
        state = self.state
        state.matches_this_round += 1
        state.matches_total += 1
        self._add_score(self.config.match_unit_value, reason="match")
        state.message = "Match!"
        if state.matches_this_round >= self.config.match_goal:
            self._complete_round()
        elif board_cleared(self.world):
            self._refill_board()
        self._publish()

    def _on_mismatched(self, first_id, second_id) -> None:
        state = self.state
        if self.config.mismatch_policy is MismatchPolicy.END_ROUND_ON_MISMATCH:
            self._close_round("mismatch")
            self._pause_round("Wrong pair!")
        else:
            tile_ids = [tile_id for tile_id in (first_id, second_id) if tile_id is not None]
            self.revert_system.schedule(tile_ids, state.generation, self.config.mismatch_reveal_delay)
            state.message = "No match"
        self._publish()

    def _on_timeout(self) -> None:
        self._close_round("timeout")
        if self.config.timeout_policy is TimeoutPolicy.END_ROUND:
            self._pause_round("Time's up!")
        else:
            self._finish_game("timeout", "Time's up! Game over.")

    def _complete_round(self) -> None:
        state = self.state
        bonus = max(0, state.time_remaining - self.config.bonus_threshold)
        if bonus:
            self._add_score(bonus, reason="time_bonus")
        self._close_round("goal_reached")
        if self.config.pause_between_levels:
            self._pause_round(f"Level {state.level} cleared!")
        else:
            self._advance_level()

    def _close_round(self, reason: str) -> RoundRecord:
        state = self.state
        record = get_round_history(self.world).append(state.matches_this_round, state.score)
        self._round_end_reason = reason
        state.mode = GameMode.ROUND_COMPLETE
        self.event_bus.emit(EVENT_ROUND_COMPLETED, record=record, reason=reason)
        return record

    def _pause_round(self, message: str) -> None:
        state = self.state
        state.round_over = True
        state.message = message
        self.timer_system.pause()
        self.revert_system.cancel_all()

    def _advance_level(self) -> None:
        state = self.state
        state.level += 1
        self._start_round(f"Level {state.level}!")
        logger.info("Advanced to level %s with %s tiles", state.level, state.grid_tile_count)
        self.event_bus.emit(EVENT_LEVEL_ADVANCED, level=state.level, tile_count=state.grid_tile_count)

    def _replay_level(self) -> None:
        self._start_round(f"Level {self.state.level} again")

    def _start_round(self, message: str) -> None:
        state = self.state
        self.revert_system.cancel_all()
        state.matches_this_round = 0
        self.board_system.spawn_grid(self.config.tile_count_for_level(state.level), reason="level")
        state.time_remaining = self.config.time_budget + self.config.level_time_extension
        state.round_over = False
        state.mode = GameMode.PLAYING
        state.message = message
        self._round_end_reason = None
        self.timer_system.start(state.game_id)
        self._publish()

    def _refill_board(self) -> None:
        state = self.state
        self.revert_system.cancel_all()
        self.board_system.spawn_grid(state.grid_tile_count, reason="refill")
        state.message = "Board refilled"
        self.event_bus.emit(EVENT_BOARD_REFILLED, tile_count=state.grid_tile_count, generation=state.generation)

    def _finish_game(self, reason: str, message: str) -> None:
        state = self.state
        state.mode = GameMode.GAME_COMPLETE
        state.round_over = True
        state.game_over = True
        state.message = message
        self.timer_system.cancel()
        self.revert_system.cancel_all()
        logger.info("Game %s over (%s): score %s at level %s", state.game_id, reason, state.score, state.level)
        self.event_bus.emit(EVENT_GAME_OVER, reason=reason, score=state.score, level=state.level)

    def _add_score(self, amount: int, *, reason: str) -> None:
        state = self.state
        state.score += amount
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=amount, reason=reason)

    def _publish(self) -> None:
        self.event_bus.emit(EVENT_STATE_CHANGED, snapshot=self.snapshot())
