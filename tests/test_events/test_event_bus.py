"""Tests for the event bus."""

from plumet.events import EventBus, FileModified, UnitBuilt, UnitFailed


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        received = []
        bus.subscribe(received.append, UnitBuilt)
        bus.emit(UnitBuilt(name="a", output="a.css", size=3))
        bus.emit(FileModified(path="x.py"))
        assert [type(e) for e in received] == [UnitBuilt]

    def test_multiple_types(self):
        bus = EventBus()
        received = []
        bus.subscribe(received.append, UnitBuilt, UnitFailed)
        bus.emit(UnitBuilt(name="a", output="a.css", size=3))
        bus.emit(UnitFailed(name="b", error="boom"))
        assert len(received) == 2

    def test_on_all_runs_before_typed(self):
        bus = EventBus()
        order = []
        bus.subscribe(lambda e: order.append("typed"), FileModified)
        bus.on_all(lambda e: order.append("all"))
        assert bus.emit(FileModified(path="x.py")) == 2
        assert order == ["all", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(received.append, FileModified)
        remove_all = bus.on_all(received.append)
        unsubscribe()
        remove_all()
        assert bus.emit(FileModified(path="x.py")) == 0
        assert received == []

    def test_events_carry_timestamps(self):
        event = FileModified(path="x.py")
        assert event.time > 0
