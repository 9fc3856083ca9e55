"""Machine cabinet, claw parts, shadow cue, and toys."""
from __future__ import annotations

import pygame

from claw_machine import MachineGeometry, Pose
from ui.constants import (
    ARM_COLOR,
    BOTTOM_BG,
    CHUTE_COLOR,
    CLAW_MISSED_COLOR,
    CLAW_OPEN_COLOR,
    JOINT_COLOR,
    LABEL_COLOR,
    MACHINE_BG,
    MARGIN,
    RAIL_COLOR,
    SHADOW_COLOR,
    TEXT_COLOR,
    TOP_BG,
    TOY_COLORS,
)
from ui.scene import SceneView

PART_COLORS = {"rail": RAIL_COLOR, "joint": JOINT_COLOR, "arm": ARM_COLOR}


def to_screen(x: float, y: float) -> tuple[int, int]:
    return int(MARGIN + x), int(MARGIN + y)


def draw_body(surface: pygame.Surface, pose: Pose, color: tuple[int, int, int]) -> None:
    """Draw a pose as a rectangle, rotated about its pivot when tilted."""
    if not pose.angle:
        x, y = to_screen(pose.x, pose.y)
        pygame.draw.rect(surface, color, (x, y, int(pose.w), int(pose.h)), border_radius=4)
        return

    image = pygame.Surface((max(1, int(pose.w)), max(1, int(pose.h))), pygame.SRCALPHA)
    pygame.draw.rect(image, color, image.get_rect(), border_radius=4)
    px, py = pose.pivot if pose.pivot is not None else (pose.w / 2, pose.h / 2)
    pivot = pygame.math.Vector2(to_screen(pose.x + px, pose.y + py))
    # Positive angles turn clockwise on screen; pygame rotates counter-clockwise.
    offset = pygame.math.Vector2(pose.w / 2 - px, pose.h / 2 - py).rotate(pose.angle)
    rotated = pygame.transform.rotate(image, -pose.angle)
    surface.blit(rotated, rotated.get_rect(center=pivot + offset))


def draw_cabinet(surface: pygame.Surface, geometry: MachineGeometry, scene: SceneView) -> None:
    x, y = to_screen(0, 0)
    pygame.draw.rect(surface, MACHINE_BG, (x, y, geometry.width, geometry.height))
    pygame.draw.rect(surface, TOP_BG, (x, y, geometry.width, geometry.top_height))
    pygame.draw.rect(
        surface,
        BOTTOM_BG,
        (x, y + geometry.bottom_offset, geometry.width, geometry.bottom_height),
    )
    # Drop chute in the bottom-left corner, lit while a toy waits there.
    chute_w = geometry.buffer_x + 80
    chute = pygame.Rect(x, y + geometry.height - 70, chute_w, 70)
    pygame.draw.rect(surface, CHUTE_COLOR, chute)
    if scene.indicator:
        pygame.draw.rect(surface, LABEL_COLOR, chute, width=3)


def draw_shadow(surface: pygame.Surface, geometry: MachineGeometry, scene: SceneView) -> None:
    arm = scene.poses.get("arm")
    if arm is None:
        return
    w = arm.w * scene.shadow_scale
    h = max(4, 12 * scene.shadow_scale)
    cx, cy = to_screen(arm.x + arm.w / 2, arm.y + geometry.max_arm_length)
    pygame.draw.ellipse(surface, SHADOW_COLOR, (cx - w / 2, cy - h / 2, w, h))


def draw_claw(surface: pygame.Surface, scene: SceneView) -> None:
    for name in ("rail", "joint", "arm"):
        pose = scene.poses.get(name)
        if pose is not None:
            draw_body(surface, pose, PART_COLORS[name])

    arm = scene.poses.get("arm")
    if arm is None:
        return
    if scene.missed:
        color = CLAW_MISSED_COLOR
    elif scene.gripper_open:
        color = CLAW_OPEN_COLOR
    else:
        color = ARM_COLOR
    spread = 10 if scene.gripper_open else 2
    tip_x, tip_y = to_screen(arm.x + arm.w / 2, arm.y + arm.h)
    pygame.draw.line(surface, color, (tip_x, tip_y), (tip_x - 12 - spread, tip_y + 18), 4)
    pygame.draw.line(surface, color, (tip_x, tip_y), (tip_x + 12 + spread, tip_y + 18), 4)


def draw_toys(surface: pygame.Surface, scene: SceneView) -> None:
    for pose in scene.toys_by_depth():
        kind = scene.kinds[pose.name]
        draw_body(surface, pose, TOY_COLORS.get(kind, TEXT_COLOR))
        if pose.name in scene.ready:
            x, y = to_screen(pose.x, pose.y)
            pygame.draw.rect(surface, LABEL_COLOR, (x, y, int(pose.w), int(pose.h)), 2)


def draw_machine(
    surface: pygame.Surface,
    geometry: MachineGeometry,
    scene: SceneView,
) -> None:
    """Draw the playfield in depth order: cabinet, shadow, toys under the claw, claw."""
    draw_cabinet(surface, geometry, scene)
    draw_shadow(surface, geometry, scene)
    draw_toys(surface, scene)
    draw_claw(surface, scene)

    if scene.overlay:
        veil = pygame.Surface((geometry.width, geometry.height), pygame.SRCALPHA)
        veil.fill((0, 0, 0, 140))
        surface.blit(veil, to_screen(0, 0))
        # The toy just collected is shown above the veil.
        if scene.showcase is not None and scene.showcase in scene.poses:
            kind = scene.kinds[scene.showcase]
            draw_body(surface, scene.poses[scene.showcase], TOY_COLORS.get(kind, TEXT_COLOR))
