"""Scene state rebuilt from the session's signals.

The renderer never reads game objects directly; everything it draws comes
from the signals the session publishes once per tick.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from claw_machine import GrabPhase, Pose
from claw_tick import SignalBus


@dataclass
class Token:
    kind: str
    squeeze: bool


@dataclass
class SceneView:
    poses: dict[str, Pose] = field(default_factory=dict)
    kinds: dict[str, str] = field(default_factory=dict)
    ready: set[str] = field(default_factory=set)
    collected: set[str] = field(default_factory=set)
    showcase: str | None = None
    controls: dict[str, bool] = field(default_factory=dict)
    tray: list[Token] = field(default_factory=list)
    phase: GrabPhase = GrabPhase.HOMING
    shadow_scale: float = 1.0
    gripper_open: bool = False
    missed: bool = False
    indicator: bool = False
    overlay: bool = False
    victory: bool = False

    def attach(self, bus: SignalBus) -> None:
        bus.subscribe_all(self._on_signal)

    def _on_signal(self, name: str, data: dict[str, Any]) -> None:
        if name == "pose":
            pose = data["pose"]
            self.poses[pose.name] = pose
        elif name == "toy_spawned":
            pose = data["pose"]
            self.poses[pose.name] = pose
            self.kinds[pose.name] = data["kind"]
        elif name == "toy_state":
            toy = f"toy-{data['index']}"
            if data["ready"]:
                self.ready.add(toy)
            else:
                self.ready.discard(toy)
            if data["collected"] and toy not in self.collected:
                self.collected.add(toy)
                self.showcase = toy
        elif name == "toys_cleared":
            for toy in list(self.kinds):
                self.poses.pop(toy, None)
            self.kinds.clear()
            self.ready.clear()
            self.collected.clear()
            self.showcase = None
        elif name == "shadow":
            self.shadow_scale = data["scale"]
        elif name == "gripper":
            self.gripper_open = data["open"]
            self.missed = data["missed"]
        elif name == "control":
            self.controls[data["name"]] = data["active"]
        elif name == "phase":
            self.phase = data["new"]
        elif name == "indicator":
            self.indicator = data["active"]
        elif name == "overlay":
            self.overlay = data["active"]
            if not self.overlay:
                self.showcase = None
        elif name == "toy_collected":
            self.tray.append(Token(data["kind"], data["squeeze"]))
        elif name == "collection_reset":
            self.tray.clear()
            self.victory = False
        elif name == "victory":
            self.victory = True

    def toys_by_depth(self) -> list[Pose]:
        """Toy poses still in the machine, lowest layer first."""
        toys = [
            self.poses[name]
            for name in self.kinds
            if name in self.poses and name not in self.collected
        ]
        return sorted(toys, key=lambda pose: pose.z)

    def toy_at(self, x: float, y: float) -> int | None:
        """Index of the topmost waiting toy under the point, if any."""
        for pose in reversed(self.toys_by_depth()):
            if pose.name not in self.ready:
                continue
            if pose.x <= x <= pose.x + pose.w and pose.y <= y <= pose.y + pose.h:
                return int(pose.name.split("-", 1)[1])
        return None
