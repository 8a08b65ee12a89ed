from __future__ import annotations

import asyncio

import pytest

from playhub.domain.clock import ProgressClock


def test_clock_ticks_until_handler_returns_false() -> None:
    async def scenario() -> int:
        ticks = 0

        async def on_tick() -> bool:
            nonlocal ticks
            ticks += 1
            return ticks < 3

        clock = ProgressClock(on_tick, interval=0.001)
        clock.start()
        await asyncio.sleep(0.1)
        running = clock.running
        await clock.aclose()
        assert not running
        return ticks

    assert asyncio.run(scenario()) == 3


def test_stop_prevents_further_ticks() -> None:
    async def scenario() -> tuple[int, int]:
        ticks = 0

        async def on_tick() -> bool:
            nonlocal ticks
            ticks += 1
            return True

        clock = ProgressClock(on_tick, interval=0.005)
        clock.start()
        await asyncio.sleep(0.05)
        clock.stop()
        after_stop = ticks
        await asyncio.sleep(0.05)
        await clock.aclose()
        return after_stop, ticks

    after_stop, final = asyncio.run(scenario())
    assert after_stop > 0
    assert final == after_stop


def test_failing_tick_stops_the_clock() -> None:
    async def scenario() -> bool:
        async def on_tick() -> bool:
            raise RuntimeError("tick failed")

        clock = ProgressClock(on_tick, interval=0.001, name="broken")
        clock.start()
        await asyncio.sleep(0.05)
        running = clock.running
        await clock.aclose()
        return running

    assert asyncio.run(scenario()) is False


def test_interval_must_be_positive() -> None:
    async def on_tick() -> bool:
        return False

    with pytest.raises(ValueError, match="positive"):
        ProgressClock(on_tick, interval=0)
