"""Player controls with a lock gate driven by the grab sequencer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from claw_tick import SignalBus

Handler = Callable[[], None]


class Control:
    """A press/release control.

    Input is ignored while locked. A release only counts after a press that
    was accepted; locking forgets any held press.
    """

    def __init__(
        self,
        name: str,
        bus: SignalBus,
        on_press: Handler | None = None,
        on_release: Handler | None = None,
        locked: bool = True,
    ) -> None:
        self.name = name
        self.on_press = on_press
        self.on_release = on_release
        self._bus = bus
        self._locked = locked
        self._held = False

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def held(self) -> bool:
        return self._held

    def press(self) -> bool:
        if self._locked or self._held:
            return False
        self._held = True
        if self.on_press is not None:
            self.on_press()
        return True

    def release(self) -> bool:
        if self._locked or not self._held:
            return False
        self._held = False
        if self.on_release is not None:
            self.on_release()
        return True

    def lock(self) -> None:
        self._locked = True
        self._held = False
        self._bus.publish("control", name=self.name, active=False)

    def unlock(self) -> None:
        self._locked = False
        self._bus.publish("control", name=self.name, active=True)
