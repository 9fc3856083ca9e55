"""Tests for the capture rectangle and toy selection."""
from __future__ import annotations

from claw_machine import GameConfig, KinematicBody, Rect, acquire_target, capture_rect, find_target


class TestRect:
    def test_origin_strictly_inside(self):
        rect = Rect(10, 20, 40, 32)
        assert rect.contains_origin(11, 21)
        assert rect.contains_origin(49.9, 51.9)

    def test_edges_do_not_count(self):
        rect = Rect(10, 20, 40, 32)
        assert not rect.contains_origin(10, 30)
        assert not rect.contains_origin(50, 30)
        assert not rect.contains_origin(30, 20)
        assert not rect.contains_origin(30, 52)


class TestCaptureRect:
    def test_offsets_from_joint(self, engine, bus):
        """Default machine: reach 424 plus buffer 16 plus claw offset 7."""
        joint = KinematicBody("joint", engine, bus, x=100, y=50)
        rect = capture_rect(joint, GameConfig())
        assert rect == Rect(107, 497, 40, 32)

    def test_follows_joint_position(self, engine, bus, config):
        joint = KinematicBody("joint", engine, bus, x=66, y=104)
        assert capture_rect(joint, config) == Rect(73, 227, 40, 32)


class TestFindTarget:
    """Origin-inside selection with highest-index tie-break."""

    def test_single_toy_under_claw(self, make_toy):
        toy = make_toy(2, 80, 235)
        assert find_target([toy], Rect(73, 227, 40, 32)) is toy

    def test_no_candidates_is_a_miss(self, make_toy):
        toys = [make_toy(0, 500, 500), make_toy(1, 0, 0)]
        assert find_target(toys, Rect(73, 227, 40, 32)) is None
        assert find_target([], Rect(73, 227, 40, 32)) is None

    def test_highest_creation_index_wins(self, make_toy):
        """Later grid order beats proximity."""
        near = make_toy(3, 74, 228)
        far = make_toy(7, 110, 256)
        claw = Rect(73, 227, 40, 32)
        assert find_target([near, far], claw) is far
        assert find_target([far, near], claw) is far

    def test_overlapping_footprint_with_origin_outside_is_ignored(self, make_toy):
        """A toy whose body covers the claw but whose origin is left of it is skipped."""
        toy = make_toy(4, 60, 230, w=40, h=54)
        claw = Rect(73, 227, 40, 32)
        assert toy.x + toy.body.w > claw.x
        assert find_target([toy], claw) is None

    def test_origin_on_edge_is_ignored(self, make_toy):
        toy = make_toy(5, 73, 240)
        assert find_target([toy], Rect(73, 227, 40, 32)) is None


class TestAcquireTarget:
    def test_locks_winner_onto_claw_point(self, engine, bus, config, make_toy):
        joint = KinematicBody("joint", engine, bus, x=66, y=104)
        toy = make_toy(9, 80, 235)
        bystander = make_toy(1, 300, 300)

        target = acquire_target([bystander, toy], joint, config)

        assert target is toy
        assert toy.body.pivot == (-7, -8)
        assert toy.claw_point == (73, 227)
        assert bystander.claw_point is None
        assert bystander.body.pivot is None

    def test_miss_leaves_toys_untouched(self, engine, bus, config, make_toy):
        joint = KinematicBody("joint", engine, bus, x=300, y=104)
        toy = make_toy(0, 80, 235)
        assert acquire_target([toy], joint, config) is None
        assert toy.claw_point is None
