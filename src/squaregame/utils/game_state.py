from __future__ import annotations

from typing import List, Tuple

from esper import World

from squaregame.components.game_state import GameState
from squaregame.components.palette import Palette
from squaregame.components.round_history import RoundHistory
from squaregame.components.selection import Selection
from squaregame.components.tile import Tile


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def get_selection(world: World) -> Selection:
    for _, selection in world.get_component(Selection):
        return selection
    world.create_entity(Selection())
    return list(world.get_component(Selection))[0][1]


def get_round_history(world: World) -> RoundHistory:
    for _, history in world.get_component(RoundHistory):
        return history
    world.create_entity(RoundHistory())
    return list(world.get_component(RoundHistory))[0][1]


def get_palette(world: World) -> Palette:
    for _, palette in world.get_component(Palette):
        return palette
    raise RuntimeError("Palette definitions not found")


def find_tile(world: World, tile_id: int) -> Tuple[int, Tile] | None:
    for entity, tile in world.get_component(Tile):
        if tile.tile_id == tile_id:
            return entity, tile
    return None


def tiles_by_id(world: World, tile_ids) -> List[Tile]:
    wanted = set(tile_ids)
    return [tile for _, tile in world.get_component(Tile) if tile.tile_id in wanted]


def board_cleared(world: World) -> bool:
    """True when every selectable tile on the board has been matched."""
    playable = [tile for _, tile in world.get_component(Tile) if not tile.filler]
    return bool(playable) and all(tile.matched for tile in playable)
