from squaregame.events.bus import EVENT_CLOCK_SECOND, EVENT_TICK, EventBus
from squaregame.systems.timer_system import TimerSystem
from squaregame.world import create_world


def _timer():
    bus = EventBus()
    world = create_world()
    timer = TimerSystem(world, bus)
    seconds = []
    bus.subscribe(EVENT_CLOCK_SECOND, lambda sender, **payload: seconds.append(payload["game_id"]))
    return bus, timer, seconds


def test_emits_one_second_per_accumulated_period():
    bus, timer, seconds = _timer()
    timer.start(3)

    for _ in range(10):
        bus.emit(EVENT_TICK, dt=0.25)

    assert seconds == [3, 3]


def test_large_frame_emits_every_whole_second():
    bus, timer, seconds = _timer()
    timer.start(1)

    bus.emit(EVENT_TICK, dt=3.5)

    assert seconds == [1, 1, 1]


def test_nothing_fires_before_start_or_after_cancel():
    bus, timer, seconds = _timer()

    bus.emit(EVENT_TICK, dt=2.0)
    assert timer.fire() is False

    timer.start(1)
    bus.emit(EVENT_TICK, dt=0.9)
    timer.cancel()
    bus.emit(EVENT_TICK, dt=5.0)

    assert seconds == []
    assert timer.fire() is False
    assert timer.game_id is None


def test_pause_and_resume():
    bus, timer, seconds = _timer()
    timer.start(2)
    timer.pause()
    bus.emit(EVENT_TICK, dt=3.0)
    assert seconds == []
    assert not timer.running

    timer.resume()
    bus.emit(EVENT_TICK, dt=1.0)
    assert seconds == [2]


def test_restart_discards_accumulated_time():
    bus, timer, seconds = _timer()
    timer.start(1)
    bus.emit(EVENT_TICK, dt=0.9)

    timer.start(2)
    bus.emit(EVENT_TICK, dt=0.5)
    assert seconds == []

    bus.emit(EVENT_TICK, dt=0.5)
    assert seconds == [2]


def test_fire_emits_immediately():
    bus, timer, seconds = _timer()
    timer.start(4)

    assert timer.fire() is True
    assert seconds == [4]
