"""Progress clock driving simulated playback."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import suppress
from logging import getLogger

log = getLogger(__name__)

# Returns ``False`` once the clock should stop ticking (e.g. the track ended).
type TickHandler = Callable[[], Awaitable[bool]]


class ProgressClock:
    """Calls ``on_tick`` once per ``interval`` seconds until stopped.

    The clock only schedules; serializing the tick against other state changes is
    the owner's job. ``start`` always begins a fresh period, so a restart never
    fires early.
    """

    def __init__(self, on_tick: TickHandler, *, interval: float = 1.0, name: str = "clock") -> None:
        if interval <= 0:
            raise ValueError(f"Clock interval must be positive, got {interval}")
        self._on_tick = on_tick
        self._interval = interval
        self._name = name
        self._task: asyncio.Task[None] | None = None
        self._retired: set[asyncio.Task[None]] = set()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.stop()
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name=f"{self._name}-tick"
        )

    def stop(self) -> None:
        task, self._task = self._task, None
        # A tick that ends the track stops the clock from inside its own task.
        if task is not None and task is not asyncio.current_task():
            task.cancel()
            self._retired.add(task)
            task.add_done_callback(self._retired.discard)

    async def aclose(self) -> None:
        """Stop ticking and wait until no tick task is left running."""

        self.stop()
        pending = [task for task in self._retired if task is not asyncio.current_task()]
        for task in pending:
            with suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                keep_ticking = await self._on_tick()
            except Exception:
                log.exception("%s tick failed; stopping the clock", self._name)
                return
            if not keep_ticking:
                return
