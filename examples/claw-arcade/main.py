"""Claw Arcade - playable claw machine on claw-machine and claw-tick.

Controls:
  D / Right     Hold to drive the carriage right, release to stop
  W / Up        Hold to move the claw back, release to drop it
  Click         Hold the on-screen buttons instead of the keys
  Click toy     Collect a toy waiting in the chute
  R             Play again after winning
  Ctrl+Shift+V  Show the victory screen
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from claw_machine import ConfigError, GameConfig, GameSession
from ui.constants import BG_COLOR, FPS, MARGIN, PANEL_W, STATUS_H
from ui.machine import draw_machine
from ui.panel import button_at, draw_panel, draw_status_bar, make_buttons
from ui.scene import SceneView
from ui.victory import VictoryScreen

logger = logging.getLogger("claw_arcade")

HORIZONTAL_KEYS = (pygame.K_RIGHT, pygame.K_d)
VERTICAL_KEYS = (pygame.K_UP, pygame.K_w)


class ArcadeState:
    """Session, signal-fed scene, and the input bookkeeping around them."""

    def __init__(self, config: GameConfig, seed: int | None) -> None:
        self.session = GameSession(config, seed=seed)
        self.scene = SceneView()
        self.scene.attach(self.session.bus)
        self.session.bus.subscribe("victory", self._on_victory)

        geo = config.geometry
        self.machine_w = geo.width + MARGIN * 2
        self.screen_w = self.machine_w + PANEL_W
        self.screen_h = geo.height + MARGIN * 2 + STATUS_H
        self.victory = VictoryScreen(self.screen_w, self.screen_h - STATUS_H)
        self.buttons = make_buttons(self.machine_w)
        self.held: set[str] = set()
        self._mouse_control: str | None = None

        self.session.start()

    def _on_victory(self, signal: str, data: dict) -> None:
        self.victory.show()

    def press(self, control: str) -> None:
        if self.session.press(control):
            self.held.add(control)

    def release(self, control: str) -> None:
        self.held.discard(control)
        self.session.release(control)

    def mouse_down(self, pos: tuple[int, int]) -> None:
        button = button_at(self.buttons, pos)
        if button is not None:
            self._mouse_control = button.control
            self.press(button.control)
            return
        index = self.scene.toy_at(pos[0] - MARGIN, pos[1] - MARGIN)
        if index is not None:
            self.session.collect(index)

    def mouse_up(self) -> None:
        if self._mouse_control is not None:
            self.release(self._mouse_control)
            self._mouse_control = None

    def restart(self) -> None:
        self.victory.hide()
        self.held.clear()
        self._mouse_control = None
        self.session.restart()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play the claw machine.")
    ap.add_argument("--config", help="TOML file overriding machine geometry and timing")
    ap.add_argument("--seed", type=int, default=None, help="seed for the toy layout")
    ap.add_argument("-v", "--verbose", action="store_true", help="log every phase change")
    return ap.parse_args(argv)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = GameConfig.from_toml(args.config) if args.config else GameConfig()
    except (ConfigError, OSError) as exc:
        logger.error("could not load config: %s", exc)
        sys.exit(2)

    state = ArcadeState(config, args.seed)

    pygame.init()
    screen = pygame.display.set_mode((state.screen_w, state.screen_h))
    pygame.display.set_caption("Claw Arcade")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    tick_interval = 1.0 / config.tps
    accumulator = 0.0
    running = True

    while running:
        frame_ms = clock.tick(FPS)
        accumulator += frame_ms / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                mods = event.mod
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_v and mods & pygame.KMOD_CTRL and mods & pygame.KMOD_SHIFT:
                    logger.info("victory screen shown from keyboard shortcut")
                    state.victory.show()
                elif event.key == pygame.K_r and (state.scene.victory or state.victory.visible):
                    state.restart()
                elif event.key in HORIZONTAL_KEYS:
                    state.press("horizontal")
                elif event.key in VERTICAL_KEYS:
                    state.press("vertical")

            elif event.type == pygame.KEYUP:
                if event.key in HORIZONTAL_KEYS:
                    state.release("horizontal")
                elif event.key in VERTICAL_KEYS:
                    state.release("vertical")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.mouse_down(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.mouse_up()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.session.step()
            accumulator -= tick_interval
        state.victory.update(frame_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_machine(screen, config.geometry, state.scene)
        draw_panel(
            screen,
            font,
            state.scene,
            state.buttons,
            state.held,
            panel_x=state.machine_w,
            height=state.screen_h - STATUS_H,
            collected=state.session.collected,
            total=config.total_toys,
        )
        draw_status_bar(screen, font, state.screen_h - STATUS_H, state.screen_w)
        state.victory.draw(screen, font, state.session.collected)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
