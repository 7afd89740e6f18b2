import random

import pytest

from squaregame.components.tile import Tile
from squaregame.errors import InsufficientPaletteError
from squaregame.events.bus import EVENT_GRID_GENERATED, EventBus
from squaregame.systems.board import BoardSystem
from squaregame.utils.game_state import get_game_state
from squaregame.world import create_world


def test_spawn_grid_creates_tile_entities():
    bus = EventBus()
    world = create_world(rng=random.Random(1))
    board = BoardSystem(world, bus)
    generated = []
    bus.subscribe(EVENT_GRID_GENERATED, lambda sender, **payload: generated.append(payload))

    tile_ids = board.spawn_grid(6, reason="test")

    tiles = [tile for _, tile in world.get_component(Tile)]
    assert sorted(tile.tile_id for tile in tiles) == sorted(tile_ids)
    assert (board.board().rows, board.board().cols) == (2, 3)
    state = get_game_state(world)
    assert state.grid_tile_count == 6
    assert generated == [{"tile_ids": tile_ids, "tile_count": 6, "generation": state.generation, "reason": "test"}]


def test_respawn_replaces_tiles_and_bumps_generation():
    bus = EventBus()
    world = create_world(rng=random.Random(1))
    board = BoardSystem(world, bus)
    first = board.spawn_grid(4)
    generation = get_game_state(world).generation

    second = board.spawn_grid(4)

    assert get_game_state(world).generation == generation + 1
    assert not set(first) & set(second)
    assert len(list(world.get_component(Tile))) == 4


def test_palette_error_keeps_existing_grid():
    bus = EventBus()
    world = create_world(rng=random.Random(1))
    board = BoardSystem(world, bus)
    tile_ids = board.spawn_grid(4)

    with pytest.raises(InsufficientPaletteError):
        board.spawn_grid(200)

    assert sorted(tile.tile_id for _, tile in world.get_component(Tile)) == sorted(tile_ids)


def test_tile_at_returns_none_off_grid():
    bus = EventBus()
    world = create_world(rng=random.Random(1))
    board = BoardSystem(world, bus)
    board.spawn_grid(4)

    assert board.tile_at(0, 0) is not None
    assert board.tile_at(5, 5) is None


def test_each_board_numbers_its_own_tiles():
    worlds = [create_world(rng=random.Random(1)) for _ in range(2)]
    boards = [BoardSystem(world, EventBus()) for world in worlds]

    first = boards[0].spawn_grid(4)
    second = boards[1].spawn_grid(4)

    assert sorted(first) == [1, 2, 3, 4]
    assert sorted(second) == [1, 2, 3, 4]
    assert sorted(boards[0].spawn_grid(4)) == [5, 6, 7, 8]
