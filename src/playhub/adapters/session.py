"""In-process audio session signal bridge backed by pyee."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pyee.asyncio import AsyncIOEventEmitter

from playhub.domain.ports.session import SessionEvent

if TYPE_CHECKING:
    import asyncio

    from playhub.domain.ports.session import SessionHandler

log = getLogger(__name__)


class SessionSignalBridge:
    """Relays ``interrupted``/``resumed`` notifications to async handlers.

    :meth:`post` is fire-and-forget and must be called from the event loop thread;
    use :meth:`post_threadsafe` from platform callbacks running elsewhere.
    The emitter schedules each handler coroutine and reports its failure as an
    ``error`` event; :meth:`drain` waits for the handlers scheduled so far.
    """

    def __init__(self, emitter: AsyncIOEventEmitter | None = None) -> None:
        self._emitter = emitter or AsyncIOEventEmitter()
        self._emitter.on("error", self._on_error)

    def connect(self, event: SessionEvent, handler: SessionHandler) -> None:
        if handler not in self._emitter.listeners(str(event)):
            self._emitter.on(str(event), handler)

    def disconnect(self, event: SessionEvent, handler: SessionHandler) -> None:
        if handler in self._emitter.listeners(str(event)):
            self._emitter.remove_listener(str(event), handler)

    def post(self, event: SessionEvent) -> None:
        log.info("Audio session %s", event)
        self._emitter.emit(str(event))

    def post_threadsafe(self, event: SessionEvent, loop: asyncio.AbstractEventLoop) -> None:
        loop.call_soon_threadsafe(self.post, event)

    def interrupted(self) -> None:
        self.post(SessionEvent.INTERRUPTED)

    def resumed(self) -> None:
        self.post(SessionEvent.RESUMED)

    async def drain(self) -> None:
        # Handlers may post further events while running.
        while not self._emitter.complete:
            await self._emitter.wait_for_complete()

    def _on_error(self, exc: BaseException) -> None:
        log.error("Audio session handler failed", exc_info=exc)
