"""Replay-latest publish/subscribe streams.

Every :class:`Observable` holds exactly one current value. Subscribing delivers that
value immediately, then every later emission, in order, on the emitting task. Callbacks
are plain functions; anything asynchronous has to be scheduled by the subscriber.
"""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

log = getLogger(__name__)

type Listener[T] = Callable[[T], None]


class Subscription:
    """Handle returned by :meth:`Observable.subscribe`; disposing it is idempotent."""

    __slots__ = ("_dispose",)

    def __init__(self, dispose: Callable[[], None]) -> None:
        self._dispose: Callable[[], None] | None = dispose

    @property
    def active(self) -> bool:
        return self._dispose is not None

    def dispose(self) -> None:
        dispose, self._dispose = self._dispose, None
        if dispose is not None:
            dispose()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


class Observable[T]:
    def __init__(self, initial: T, *, name: str = "observable", distinct: bool = False) -> None:
        self._value = initial
        self._name = name
        self._distinct = distinct
        self._listeners: dict[int, Listener[T]] = {}
        self._next_token = 0

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T], *, replay: bool = True) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = listener
        if replay:
            self._deliver(listener, self._value)
        return Subscription(lambda: self._listeners.pop(token, None))

    def emit(self, value: T) -> None:
        if self._distinct and value == self._value:
            return
        self._value = value
        # Listeners may (un)subscribe while being notified.
        for listener in list(self._listeners.values()):
            self._deliver(listener, value)

    def _deliver(self, listener: Listener[T], value: T) -> None:
        try:
            listener(value)
        except Exception:
            log.exception("Listener on %s failed for %r", self._name, value)

    def __repr__(self) -> str:
        return f"Observable({self._name}={self._value!r})"
