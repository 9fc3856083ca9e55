"""Exceptions raised by the claw machine core."""
from __future__ import annotations


class ClawMachineError(Exception):
    """Base class for claw machine errors."""


class InvalidAxisError(ClawMachineError, ValueError):
    """Raised when a movement names an axis the body does not have."""

    def __init__(self, body: str, axis: str) -> None:
        self.body = body
        self.axis = axis
        super().__init__(f"{body!r} has no axis {axis!r}")


class PhaseTransitionError(ClawMachineError, RuntimeError):
    """Raised when the grab sequencer attempts a transition the table forbids."""

    def __init__(self, current: object, requested: object) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot transition from {current} to {requested}")


class ConfigError(ClawMachineError, ValueError):
    """Raised for invalid or unknown configuration values."""
