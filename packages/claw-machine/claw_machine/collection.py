"""Collected-toy count and the win condition."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from claw_machine.toys import Toy
    from claw_tick import SignalBus

logger = logging.getLogger(__name__)


class CollectionTracker:
    def __init__(self, total: int, bus: SignalBus, squeeze_after: int = 6) -> None:
        self.total = total
        self.squeeze_after = squeeze_after
        self._bus = bus
        self._count = 0
        self._won = False

    @property
    def count(self) -> int:
        return self._count

    @property
    def won(self) -> bool:
        return self._won

    def record(self, toy: Toy) -> int:
        self._count += 1
        logger.info("collected %s (%d/%d)", toy.kind.name, self._count, self.total)
        self._bus.publish(
            "toy_collected",
            index=toy.index,
            kind=toy.kind.name,
            count=self._count,
            squeeze=self._count > self.squeeze_after,
        )
        return self._count

    def check_victory(self) -> bool:
        """Signal victory the first time every toy has been collected."""
        if self._won or self._count != self.total:
            return False
        self._won = True
        logger.info("all %d toys collected", self.total)
        self._bus.publish("victory", collected=self._count)
        return True

    def reset(self) -> None:
        self._count = 0
        self._won = False
        self._bus.publish("collection_reset")
