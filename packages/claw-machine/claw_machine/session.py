"""Game session: the context object that owns one game's state.

Signals published on ``session.bus`` for the outside world:

``pose``            a body moved (``pose``)
``shadow``          arm extension cue (``body``, ``scale``)
``gripper``         claw open/missed flags (``open``, ``missed``)
``control``         a control was locked or unlocked (``name``, ``active``)
``phase``           grab phase changed (``old``, ``new``)
``toy_spawned``     a toy was placed (``index``, ``kind``, ``pose``)
``toy_state``       toy flags changed (``index``, ``kind``, ``grabbed``, ``ready``, ``collected``)
``toys_cleared``    every toy was removed on restart
``indicator``       the collect indicator toggled (``active``)
``overlay``         the collection overlay toggled (``active``)
``toy_collected``   a token joins the collection display (``index``, ``kind``, ``count``, ``squeeze``)
``collection_reset``  the collection display empties
``victory``         every toy was collected (``collected``)
"""
from __future__ import annotations

import logging

from claw_machine.claw import ClawAssembly
from claw_machine.collection import CollectionTracker
from claw_machine.config import GameConfig
from claw_machine.controls import Control
from claw_machine.phases import GrabPhase
from claw_machine.sequencer import GrabSequencer
from claw_machine.toys import Toy, ToyRegistry
from claw_tick import Engine, SignalBus, make_signal_system

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = Engine(tps=self.config.tps, seed=seed)
        self.bus = SignalBus()
        self.engine.add_system(make_signal_system(self.bus))

        self.claw = ClawAssembly(self.config, self.engine, self.bus)
        self.toys = ToyRegistry()
        self.tracker = CollectionTracker(
            self.config.total_toys, self.bus, squeeze_after=self.config.squeeze_after
        )
        self.sequencer = GrabSequencer(self)
        self.horizontal = Control(
            "horizontal",
            self.bus,
            on_press=self.sequencer.on_horizontal_press,
            on_release=self.sequencer.on_horizontal_release,
        )
        self.vertical = Control(
            "vertical",
            self.bus,
            on_press=self.sequencer.on_vertical_press,
            on_release=self.sequencer.on_vertical_release,
        )
        self.controls = {control.name: control for control in (self.horizontal, self.vertical)}

        self.target: Toy | None = None
        self.playing = False
        self.overlay = False
        self.indicator = False
        self._started = False

    @property
    def phase(self) -> GrabPhase:
        return self.sequencer.phase

    @property
    def collected(self) -> int:
        return self.tracker.count

    def start(self) -> None:
        if self._started:
            raise RuntimeError("session already started")
        self._started = True
        self.toys.spawn(self.config, self.engine, self.bus)
        self.claw.publish()
        logger.info(
            "session started (seed=%d, %d toys)", self.engine.seed, len(self.toys)
        )
        self.sequencer.home()

    def step(self) -> None:
        self.engine.step()

    def run(self, n: int) -> None:
        self.engine.run(n)

    def press(self, control: str) -> bool:
        return self.controls[control].press()

    def release(self, control: str) -> bool:
        return self.controls[control].release()

    def set_indicator(self, active: bool) -> None:
        self.indicator = active
        self.bus.publish("indicator", active=active)

    def set_overlay(self, active: bool) -> None:
        self.overlay = active
        self.bus.publish("overlay", active=active)

    def collect(self, index: int) -> bool:
        """Collect a toy waiting in the chute. Other toys are ignored."""
        toy = self.toys.get(index)
        if not toy.ready:
            return False
        geo = self.config.geometry
        body = toy.body
        body.stop()
        toy.ready = False
        toy.collected = True
        body.x = geo.width / 2 - body.w / 2
        body.y = geo.height / 2 - body.h / 2
        body.z = 7
        body.angle = 0
        body.pivot = None
        body.publish()
        self.bus.publish("toy_state", **toy.state())
        self.tracker.record(toy)
        self.set_overlay(True)
        self.engine.call_later(
            self.config.timing.collect_display_ms, self._after_collect, name="collect"
        )
        return True

    def _after_collect(self) -> None:
        self.set_overlay(False)
        if not self.toys.ready():
            self.set_indicator(False)
        if self.tracker.check_victory():
            self.playing = False

    def restart(self) -> None:
        """Throw away all game state and start over."""
        logger.info("restarting session after %d collected", self.tracker.count)
        self.engine.cancel_all()
        self.bus.clear()
        self.toys.clear()
        self.bus.publish("toys_cleared")
        self.target = None
        self.playing = False
        self.set_overlay(False)
        self.set_indicator(False)
        for control in self.controls.values():
            control.lock()
        self.claw.reset()
        self.sequencer.reset()
        self.tracker.reset()
        self._started = False
        self.start()
