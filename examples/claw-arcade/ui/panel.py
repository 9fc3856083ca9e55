"""Side panel: control buttons, collection tray, and the status bar."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from ui.constants import (
    BUTTON_ACTIVE,
    BUTTON_H,
    BUTTON_HELD,
    BUTTON_IDLE,
    LABEL_COLOR,
    MARGIN,
    PANEL_BG,
    PANEL_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TOKEN_SIZE,
    TOKEN_SQUEEZED,
    TOY_COLORS,
)
from ui.scene import SceneView


@dataclass
class Button:
    control: str
    label: str
    rect: pygame.Rect


def make_buttons(panel_x: int) -> list[Button]:
    x = panel_x + MARGIN
    w = PANEL_W - MARGIN * 2
    return [
        Button("horizontal", "RIGHT  [D]", pygame.Rect(x, MARGIN + 40, w, BUTTON_H)),
        Button("vertical", "UP  [W]", pygame.Rect(x, MARGIN + 50 + BUTTON_H, w, BUTTON_H)),
    ]


def button_at(buttons: list[Button], pos: tuple[int, int]) -> Button | None:
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button
    return None


def draw_panel(
    surface: pygame.Surface,
    font: pygame.font.Font,
    scene: SceneView,
    buttons: list[Button],
    held: set[str],
    panel_x: int,
    height: int,
    collected: int,
    total: int,
) -> None:
    """Draw the right-hand panel."""
    pygame.draw.rect(surface, PANEL_BG, (panel_x, 0, PANEL_W, height))
    pygame.draw.line(surface, (50, 50, 70), (panel_x, 0), (panel_x, height))

    cx = panel_x + MARGIN
    surface.blit(font.render("CLAW ARCADE", True, LABEL_COLOR), (cx, MARGIN))

    for button in buttons:
        if button.control in held:
            fill = BUTTON_HELD
        elif scene.controls.get(button.control):
            fill = BUTTON_ACTIVE
        else:
            fill = BUTTON_IDLE
        pygame.draw.rect(surface, fill, button.rect, border_radius=8)
        label = font.render(button.label, True, PANEL_BG if fill != BUTTON_IDLE else TEXT_DIM)
        surface.blit(label, label.get_rect(center=button.rect.center))

    cy = MARGIN + 70 + BUTTON_H * 2
    surface.blit(font.render(f"Phase: {scene.phase.value}", True, TEXT_COLOR), (cx, cy))
    cy += 22
    surface.blit(font.render(f"Collected: {collected}/{total}", True, TEXT_COLOR), (cx, cy))
    cy += 22
    if scene.missed:
        surface.blit(font.render("Missed!", True, (250, 104, 104)), (cx, cy))
    cy += 30

    surface.blit(font.render("Collection", True, TEXT_DIM), (cx, cy))
    cy += 22
    draw_tray(surface, scene, cx, cy, PANEL_W - MARGIN * 2)


def draw_tray(surface: pygame.Surface, scene: SceneView, x: int, y: int, width: int) -> None:
    """Tokens left to right, wrapping; tokens past the sixth are squeezed in."""
    tx, ty = x, y
    for token in scene.tray:
        size = TOKEN_SQUEEZED if token.squeeze else TOKEN_SIZE
        if tx + size > x + width:
            tx = x
            ty += TOKEN_SIZE + 6
        color = TOY_COLORS.get(token.kind, TEXT_COLOR)
        pygame.draw.rect(surface, color, (tx, ty + (TOKEN_SIZE - size), size, size), border_radius=6)
        tx += size + 4


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, y: int, width: int) -> None:
    """Draw bottom key-bindings bar."""
    pygame.draw.rect(surface, STATUS_BG, (0, y, width, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (width, y))
    text = "[D/Right] Move  [W/Up] Aim  [Click] Collect  [R] Restart after win  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
