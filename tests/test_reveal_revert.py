import random

from squaregame.components.game_state import GameMode
from squaregame.events.bus import EVENT_REVEAL_REVERTED, EVENT_TICK, EventBus
from squaregame.systems.board import BoardSystem
from squaregame.systems.reveal_revert_system import RevealRevertSystem
from squaregame.utils.game_state import find_tile, get_game_state
from squaregame.world import create_world


def _setup():
    bus = EventBus()
    world = create_world(rng=random.Random(5))
    board = BoardSystem(world, bus)
    tile_ids = board.spawn_grid(4)
    get_game_state(world).mode = GameMode.PLAYING
    for tile_id in tile_ids:
        find_tile(world, tile_id)[1].revealed = True
    reverts = RevealRevertSystem(world, bus)
    events = []
    bus.subscribe(EVENT_REVEAL_REVERTED, lambda sender, **payload: events.append(payload))
    return bus, world, board, reverts, tile_ids, events


def test_revert_applies_after_delay():
    bus, world, board, reverts, tile_ids, events = _setup()
    generation = get_game_state(world).generation
    reverts.schedule(tile_ids[:2], generation, 0.5)

    bus.emit(EVENT_TICK, dt=0.3)
    assert find_tile(world, tile_ids[0])[1].revealed

    bus.emit(EVENT_TICK, dt=0.3)
    assert not find_tile(world, tile_ids[0])[1].revealed
    assert not find_tile(world, tile_ids[1])[1].revealed
    assert find_tile(world, tile_ids[2])[1].revealed
    assert events == [{"tile_ids": tile_ids[:2], "generation": generation}]
    assert reverts.pending() == []


def test_zero_delay_applies_on_next_frame():
    bus, world, board, reverts, tile_ids, events = _setup()
    reverts.schedule(tile_ids[:2], get_game_state(world).generation, 0.0)
    assert find_tile(world, tile_ids[0])[1].revealed

    bus.emit(EVENT_TICK, dt=0.0)

    assert not find_tile(world, tile_ids[0])[1].revealed


def test_stale_generation_is_discarded():
    bus, world, board, reverts, tile_ids, events = _setup()
    stale = get_game_state(world).generation - 1
    reverts.schedule(tile_ids[:2], stale, 0.1)

    bus.emit(EVENT_TICK, dt=1.0)

    assert find_tile(world, tile_ids[0])[1].revealed
    assert events == []
    assert reverts.pending() == []


def test_matched_tiles_stay_face_up():
    bus, world, board, reverts, tile_ids, events = _setup()
    find_tile(world, tile_ids[1])[1].matched = True
    reverts.schedule(tile_ids[:2], get_game_state(world).generation, 0.1)

    bus.emit(EVENT_TICK, dt=0.2)

    assert not find_tile(world, tile_ids[0])[1].revealed
    assert find_tile(world, tile_ids[1])[1].revealed
    assert events[0]["tile_ids"] == [tile_ids[0]]


def test_cancel_all_drops_pending():
    bus, world, board, reverts, tile_ids, events = _setup()
    reverts.schedule(tile_ids[:2], get_game_state(world).generation, 0.1)

    reverts.cancel_all()
    bus.emit(EVENT_TICK, dt=1.0)

    assert find_tile(world, tile_ids[0])[1].revealed
    assert events == []
