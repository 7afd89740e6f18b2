"""Immutable views of the session handed to the rendering side."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from squaregame.components.board_position import BoardPosition
from squaregame.components.game_state import GameMode
from squaregame.components.round_history import RoundRecord
from squaregame.components.tile import Tile
from squaregame.utils.game_state import get_game_state, get_round_history


@dataclass(frozen=True, slots=True)
class TileView:
    tile_id: int
    color: str
    revealed: bool
    matched: bool
    filler: bool
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    tiles: Tuple[TileView, ...]
    mode: GameMode
    score: int
    time_remaining: int
    level: int
    matches_this_round: int
    matches_total: int
    match_goal: int
    round_over: bool
    game_over: bool
    grid_tile_count: int
    message: str
    history: Tuple[RoundRecord, ...]

    def tile(self, tile_id: int) -> TileView | None:
        for view in self.tiles:
            if view.tile_id == tile_id:
                return view
        return None


def build_snapshot(world: World, match_goal: int) -> GameSnapshot:
    views = []
    for entity, (tile, position) in world.get_components(Tile, BoardPosition):
        views.append(TileView(
            tile_id=tile.tile_id,
            color=tile.color,
            revealed=tile.revealed,
            matched=tile.matched,
            filler=tile.filler,
            row=position.row,
            col=position.col,
        ))
    views.sort(key=lambda view: (view.row, view.col))
    state = get_game_state(world)
    return GameSnapshot(
        tiles=tuple(views),
        mode=state.mode,
        score=state.score,
        time_remaining=state.time_remaining,
        level=state.level,
        matches_this_round=state.matches_this_round,
        matches_total=state.matches_total,
        match_goal=match_goal,
        round_over=state.round_over,
        game_over=state.game_over,
        grid_tile_count=state.grid_tile_count,
        message=state.message,
        history=tuple(get_round_history(world).records),
    )
