"""In-memory pub/sub signal bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

from claw_tick.types import TickContext

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals and delivers them on ``flush``.

    Handlers registered with ``subscribe_all`` receive every signal after the
    named subscribers for that signal.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._catch_all: list[Handler] = []
        self._queue: list[tuple[str, dict[str, Any]]] = []

    @property
    def queued(self) -> int:
        return len(self._queue)

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        self._catch_all.append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        # Signals published by handlers wait for the next flush.
        pending = self._queue
        self._queue = []
        for signal_name, data in pending:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            for handler in list(self._catch_all):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
