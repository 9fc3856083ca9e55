"""Victory screen with timed confetti bursts."""
from __future__ import annotations

import random
from dataclasses import dataclass

import pygame

from ui.constants import (
    CONFETTI_BURSTS_MS,
    CONFETTI_COLORS,
    CONFETTI_PER_BURST,
    LABEL_COLOR,
    TEXT_COLOR,
    VICTORY_DELAY_MS,
)


@dataclass
class Confetti:
    x: float
    y: float
    speed: float
    sway: float
    color: tuple[int, int, int]
    delay_ms: float


class VictoryScreen:
    """Shown half a second after victory; pieces fall for a few seconds each."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.visible = False
        self._pending_ms: float | None = None
        self._bursts: list[float] = []
        self._pieces: list[Confetti] = []
        self._rng = random.Random()

    def show(self) -> None:
        if self.visible or self._pending_ms is not None:
            return
        self._pending_ms = VICTORY_DELAY_MS

    def hide(self) -> None:
        self.visible = False
        self._pending_ms = None
        self._bursts.clear()
        self._pieces.clear()

    def _burst(self) -> None:
        for _ in range(CONFETTI_PER_BURST):
            # Fall time between two and five seconds across the screen.
            fall_s = self._rng.uniform(2, 5)
            self._pieces.append(
                Confetti(
                    x=self._rng.uniform(0, self.width),
                    y=-10,
                    speed=(self.height + 20) / fall_s,
                    sway=self._rng.uniform(-30, 30),
                    color=self._rng.choice(CONFETTI_COLORS),
                    delay_ms=self._rng.uniform(0, 500),
                )
            )

    def update(self, dt_ms: float) -> None:
        if self._pending_ms is not None:
            self._pending_ms -= dt_ms
            if self._pending_ms <= 0:
                self._pending_ms = None
                self.visible = True
                self._bursts = list(CONFETTI_BURSTS_MS)
        if not self.visible:
            return

        self._bursts = [at - dt_ms for at in self._bursts]
        while self._bursts and self._bursts[0] <= 0:
            self._bursts.pop(0)
            self._burst()

        dt = dt_ms / 1000.0
        alive = []
        for piece in self._pieces:
            if piece.delay_ms > 0:
                piece.delay_ms -= dt_ms
            else:
                piece.y += piece.speed * dt
                piece.x += piece.sway * dt
            if piece.y < self.height:
                alive.append(piece)
        self._pieces = alive

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, collected: int) -> None:
        if not self.visible:
            return
        veil = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        veil.fill((10, 8, 20, 180))
        surface.blit(veil, (0, 0))

        for piece in self._pieces:
            if piece.delay_ms <= 0:
                pygame.draw.rect(surface, piece.color, (int(piece.x), int(piece.y), 8, 12))

        title = font.render("YOU WIN!", True, LABEL_COLOR)
        sub = font.render(f"All {collected} toys collected  -  press R to play again", True, TEXT_COLOR)
        cx, cy = self.width // 2, self.height // 2
        surface.blit(title, title.get_rect(center=(cx, cy - 16)))
        surface.blit(sub, sub.get_rect(center=(cx, cy + 16)))
