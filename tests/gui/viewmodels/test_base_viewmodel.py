"""Tests for BaseViewModel: pure Python, no Qt dependency."""

from dataclasses import dataclass

from showcase.events.bus import Event, EventBus
from showcase.gui.viewmodels.base import BaseViewModel


@dataclass(kw_only=True)
class _FakeEvent(Event):
    payload: str = ""


class TestBaseViewModel:
    def test_subscribe_event_receives_events(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        vm.subscribe_event(bus, _FakeEvent, lambda e: received.append(e.payload))
        bus.publish(_FakeEvent(payload="hello"))

        assert received == ["hello"]

    def test_dispose_cancels_subscriptions(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        vm.subscribe_event(bus, _FakeEvent, lambda e: received.append(e.payload))
        bus.publish(_FakeEvent(payload="before"))
        vm.dispose()
        bus.publish(_FakeEvent(payload="after"))

        assert received == ["before"]

    def test_cleanups_run_newest_first(self):
        vm = BaseViewModel()
        order = []
        vm.add_cleanup(lambda: order.append("first"))
        vm.add_cleanup(lambda: order.append("second"))

        vm.dispose()

        assert order == ["second", "first"]

    def test_dispose_is_idempotent(self):
        vm = BaseViewModel()
        calls = []
        vm.add_cleanup(lambda: calls.append(1))
        vm.dispose()
        vm.dispose()
        assert calls == [1]
        assert vm.disposed is True

    def test_failing_cleanup_does_not_stop_others(self, caplog):
        vm = BaseViewModel()
        calls = []

        def broken():
            raise RuntimeError("cleanup bug")

        vm.add_cleanup(lambda: calls.append("ran"))
        vm.add_cleanup(broken)
        with caplog.at_level("ERROR"):
            vm.dispose()

        assert calls == ["ran"]
