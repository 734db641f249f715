"""Tests for the Debouncer."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from kubewatch.engine.debounce import Debouncer, loop_scheduler


class FakeScheduler:
    """Collects scheduled callbacks so tests can fire them by hand."""

    def __init__(self) -> None:
        self.calls: list[tuple[float, object, MagicMock]] = []

    def __call__(self, delay, callback):
        handle = MagicMock()
        self.calls.append((delay, callback, handle))
        return handle

    def fire_last(self) -> None:
        _, callback, _ = self.calls[-1]
        callback()


@pytest.mark.unit
@pytest.mark.fast
class TestDebouncer:
    """Tests for Debouncer with an injected scheduler."""

    def test_trigger_schedules_with_delay(self) -> None:
        scheduler = FakeScheduler()
        debouncer = Debouncer(MagicMock(), delay=0.25, scheduler=scheduler)

        debouncer.trigger()

        assert len(scheduler.calls) == 1
        assert scheduler.calls[0][0] == 0.25
        assert debouncer.pending is True

    def test_retrigger_cancels_previous_timer(self) -> None:
        scheduler = FakeScheduler()
        debouncer = Debouncer(MagicMock(), scheduler=scheduler)

        debouncer.trigger()
        debouncer.trigger()

        first_handle = scheduler.calls[0][2]
        first_handle.stop.assert_called_once()
        assert len(scheduler.calls) == 2

    def test_fire_invokes_callback_once(self) -> None:
        callback = MagicMock()
        scheduler = FakeScheduler()
        debouncer = Debouncer(callback, scheduler=scheduler)

        debouncer.trigger()
        debouncer.trigger()
        scheduler.fire_last()

        callback.assert_called_once()
        assert debouncer.pending is False

    def test_cancel_clears_pending(self) -> None:
        scheduler = FakeScheduler()
        debouncer = Debouncer(MagicMock(), scheduler=scheduler)

        debouncer.trigger()
        debouncer.cancel()

        assert debouncer.pending is False
        scheduler.calls[0][2].stop.assert_called_once()

    def test_trigger_without_callback_does_nothing(self) -> None:
        scheduler = FakeScheduler()
        debouncer = Debouncer(None, scheduler=scheduler)

        debouncer.trigger()

        assert scheduler.calls == []
        assert debouncer.pending is False

    def test_set_delay_applies_to_next_trigger(self) -> None:
        scheduler = FakeScheduler()
        debouncer = Debouncer(MagicMock(), delay=0.1, scheduler=scheduler)

        debouncer.set_delay(0.5)
        debouncer.trigger()

        assert debouncer.delay == 0.5
        assert scheduler.calls[0][0] == 0.5

    def test_set_delay_never_negative(self) -> None:
        debouncer = Debouncer(MagicMock(), scheduler=FakeScheduler())

        debouncer.set_delay(-1.0)

        assert debouncer.delay == 0.0

    def test_cancel_uses_cancel_when_handle_has_no_stop(self) -> None:
        handle = MagicMock(spec=["cancel"])
        debouncer = Debouncer(MagicMock(), scheduler=lambda delay, cb: handle)

        debouncer.trigger()
        debouncer.cancel()

        handle.cancel.assert_called_once()


@pytest.mark.unit
class TestLoopScheduler:
    """Tests for the asyncio-backed default scheduler."""

    def test_without_running_loop_returns_none(self) -> None:
        assert loop_scheduler(0.01, MagicMock()) is None

    @pytest.mark.asyncio
    async def test_fires_once_after_burst(self) -> None:
        callback = MagicMock()
        debouncer = Debouncer(callback, delay=0.02)

        for _ in range(5):
            debouncer.trigger()
            await asyncio.sleep(0.005)
        assert callback.call_count == 0

        await asyncio.sleep(0.06)

        callback.assert_called_once()
        assert debouncer.pending is False
