"""Tests for the animated counter, driven frame by frame with a fake clock."""
import asyncio

import pytest

from agencydash.animation import AnimatedCounter, AsyncioFrameScheduler, BlockingFrameScheduler


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _make(target, duration_ms=1000, **kwargs):
    clock = FakeClock()
    scheduler = BlockingFrameScheduler(interval_ms=16, sleep=lambda _: None)
    seen: list[int] = []
    counter = AnimatedCounter(
        target, scheduler=scheduler, duration_ms=duration_ms, clock=clock, on_change=seen.append, **kwargs,
    )
    return counter, scheduler, clock, seen


def _play(counter, scheduler, clock, step_ms):
    while scheduler.pending:
        clock.now += step_ms
        scheduler.run_frame()


@pytest.mark.parametrize("target,duration,step", [
    (0, 1000, 16), (1, 1000, 16), (7, 100, 33), (150, 2000, 16.7), (12345, 1500, 17), (999, 10, 3),
])
def test_final_value_is_exactly_target(target, duration, step):
    counter, scheduler, clock, seen = _make(target, duration)
    counter.start()
    _play(counter, scheduler, clock, step)
    assert counter.value == target
    assert seen[-1] == target
    assert not counter.running


def test_sequence_is_non_decreasing_and_deduplicated():
    counter, scheduler, clock, seen = _make(10, 1000)
    counter.start()
    _play(counter, scheduler, clock, 16)
    assert seen == sorted(seen)
    assert seen[0] == 0
    # only changes are reported, so each value appears once
    assert len(seen) == len(set(seen))
    assert seen == list(range(11))


def test_jittery_frames_still_land_on_target():
    counter, scheduler, clock, seen = _make(1000, 500)
    counter.start()
    for step in [1, 250, 3, 0, 90, 400]:
        clock.now += step
        scheduler.run_frame()
    assert counter.value == 1000
    assert seen == sorted(seen)


def test_target_zero_stays_zero():
    counter, scheduler, clock, seen = _make(0, 500)
    counter.start()
    frames = 0
    while scheduler.pending:
        clock.now += 100
        scheduler.run_frame()
        frames += 1
    assert frames == 5
    assert seen == [0]
    assert counter.value == 0


@pytest.mark.parametrize("duration", [0, -50])
def test_non_positive_duration_jumps_to_target(duration):
    counter, scheduler, clock, seen = _make(42, duration)
    counter.start()
    assert counter.value == 42
    assert seen == [0, 42]
    assert scheduler.pending == 0


def test_changing_target_restarts_from_zero():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    clock.now += 500
    scheduler.run_frame()
    assert counter.value == 50

    counter.set_target(200)
    assert counter.value == 0
    assert seen[-1] == 0
    assert scheduler.pending == 1

    clock.now += 250
    scheduler.run_frame()
    assert counter.value == 50  # 25% of 200, measured from the restart
    _play(counter, scheduler, clock, 100)
    assert counter.value == 200


def test_setting_same_target_does_not_restart():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    clock.now += 500
    scheduler.run_frame()
    counter.set_target(100)
    assert counter.value == 50


def test_close_mid_animation_stops_updates():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    clock.now += 300
    scheduler.run_frame()
    before = list(seen)

    counter.close()
    assert scheduler.pending == 0
    clock.now += 1000
    scheduler.run_frame()
    assert seen == before
    assert counter.value == 30
    assert not counter.running


def test_close_is_idempotent_and_blocks_restart():
    counter, *_ = _make(5, 100)
    counter.start()
    counter.close()
    counter.close()
    assert counter.closed
    with pytest.raises(RuntimeError):
        counter.start()


def test_text_uses_prefix_and_thousands_separator():
    counter, scheduler, clock, _ = _make(1234567, 100, prefix="$")
    counter.start()
    assert counter.text == "$0"
    _play(counter, scheduler, clock, 50)
    assert counter.text == "$1,234,567"


def test_asyncio_scheduler_drives_counter_to_target():
    async def run() -> list[int]:
        seen: list[int] = []
        counter = AnimatedCounter(25, scheduler=AsyncioFrameScheduler(interval_ms=1), duration_ms=30, on_change=seen.append)
        counter.start()
        while counter.running:
            await asyncio.sleep(0.005)
        counter.close()
        return seen

    seen = asyncio.run(run())
    assert seen[0] == 0
    assert seen[-1] == 25
    assert seen == sorted(seen)


def test_asyncio_scheduler_close_cancels_timer():
    async def run() -> list[int]:
        seen: list[int] = []
        counter = AnimatedCounter(25, scheduler=AsyncioFrameScheduler(interval_ms=1), duration_ms=10_000, on_change=seen.append)
        counter.start()
        await asyncio.sleep(0.02)
        counter.close()
        snapshot = list(seen)
        await asyncio.sleep(0.02)
        assert seen == snapshot
        return seen

    asyncio.run(run())


def test_blocking_scheduler_run_counts_frames():
    sleeps: list[float] = []
    scheduler = BlockingFrameScheduler(interval_ms=20, sleep=sleeps.append)
    fired: list[int] = []
    scheduler.request_frame(lambda: fired.append(1))
    handle = scheduler.request_frame(lambda: fired.append(2))
    scheduler.cancel_frame(handle)
    assert scheduler.run() == 1
    assert fired == [1]
    assert sleeps == [0.02]


def test_setting_same_duration_does_not_restart():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    clock.now += 500
    scheduler.run_frame()
    counter.set_duration(1000)
    assert counter.value == 50
    assert scheduler.pending == 1


def test_new_duration_restarts_from_zero():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    clock.now += 500
    scheduler.run_frame()

    counter.set_duration(2000)
    assert counter.value == 0
    assert seen[-1] == 0

    clock.now += 1000
    scheduler.run_frame()
    assert counter.value == 50  # half of the new 2000ms run
    _play(counter, scheduler, clock, 100)
    assert counter.value == 100


def test_setters_on_closed_counter_leave_state_untouched():
    counter, scheduler, clock, seen = _make(100, 1000)
    counter.start()
    counter.close()
    with pytest.raises(RuntimeError):
        counter.set_target(200)
    with pytest.raises(RuntimeError):
        counter.set_duration(50)
    assert counter.state.target_value == 100
    assert counter.state.duration_ms == 1000
    assert scheduler.pending == 0
