"""Unit tests for SignalBus and the flush system."""
from __future__ import annotations

from claw_tick import Engine, SignalBus, make_signal_system


def test_publish_is_queued_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe("pose", lambda name, data: received.append((name, data)))

    bus.publish("pose", x=10)
    assert received == []
    assert bus.queued == 1

    bus.flush()
    assert received == [("pose", {"x": 10})]
    assert bus.queued == 0


def test_publish_without_subscribers_is_noop():
    bus = SignalBus()
    bus.publish("nobody", value=1)
    bus.flush()


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    order = []
    bus.subscribe("phase", lambda n, d: order.append("a"))
    bus.subscribe("phase", lambda n, d: order.append("b"))
    bus.subscribe_all(lambda n, d: order.append("all"))
    bus.publish("phase", new="idle")
    bus.flush()
    assert order == ["a", "b", "all"]


def test_signals_delivered_in_publish_order():
    bus = SignalBus()
    seen = []
    bus.subscribe_all(lambda name, data: seen.append(name))
    bus.publish("first")
    bus.publish("second")
    bus.publish("first")
    bus.flush()
    assert seen == ["first", "second", "first"]


def test_unsubscribe():
    bus = SignalBus()
    received = []

    def handler(name, data):
        received.append(name)

    bus.subscribe("victory", handler)
    bus.unsubscribe("victory", handler)
    bus.unsubscribe("victory", handler)
    bus.unsubscribe("never_subscribed", handler)
    bus.publish("victory")
    bus.flush()
    assert received == []


def test_publish_during_flush_waits_for_next_flush():
    bus = SignalBus()
    received = []

    def relay(name, data):
        received.append(name)
        if name == "ping":
            bus.publish("pong")

    bus.subscribe("ping", relay)
    bus.subscribe("pong", relay)
    bus.publish("ping")
    bus.flush()
    assert received == ["ping"]
    bus.flush()
    assert received == ["ping", "pong"]


def test_clear_drops_queued_signals():
    bus = SignalBus()
    received = []
    bus.subscribe("pose", lambda n, d: received.append(n))
    bus.publish("pose")
    bus.clear()
    bus.flush()
    assert received == []


def test_signal_system_flushes_every_tick():
    engine = Engine(tps=20, seed=42)
    bus = SignalBus()
    received = []
    bus.subscribe("tick", lambda n, d: received.append(d["number"]))
    engine.call_every(50, lambda: bus.publish("tick", number=engine.clock.tick_number))
    engine.add_system(make_signal_system(bus))

    engine.run(3)
    assert received == [1, 2, 3]
