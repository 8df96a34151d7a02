"""Unit tests for EventBus."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import uuid4

import pytest

from learnhub.domain.event import EventBus, ProfileFieldChanged
from learnhub.domain.repository import UnitOfWork
from learnhub.domain.value import StampPatch, UserId


class RecordingUnitOfWork(UnitOfWork):
    """Records which isolated blocks were rolled back."""

    def __init__(self) -> None:
        self.committed = 0
        self.rolled_back = 0

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        try:
            yield
        except Exception:
            self.rolled_back += 1
            raise
        self.committed += 1


def _event() -> ProfileFieldChanged:
    return ProfileFieldChanged(
        user_id=UserId(uuid4()), patch=StampPatch(display_name="Ada")
    )


class TestEventBus:
    """Tests for publish and subscribe."""

    @pytest.mark.asyncio
    async def test_handlers_run_in_subscription_order(self):
        bus = EventBus(RecordingUnitOfWork())
        calls = []

        async def first(event):
            calls.append("first")

        async def second(event):
            calls.append("second")

        bus.subscribe(ProfileFieldChanged, first)
        bus.subscribe(ProfileFieldChanged, second)

        await bus.publish(_event())

        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_failing_handler_is_isolated(self):
        """A failing handler is rolled back alone and publish does not raise."""
        # Arrange
        unit_of_work = RecordingUnitOfWork()
        bus = EventBus(unit_of_work)
        calls = []

        async def broken(event):
            raise RuntimeError("storage unavailable")

        async def healthy(event):
            calls.append(event.user_id)

        bus.subscribe(ProfileFieldChanged, broken)
        bus.subscribe(ProfileFieldChanged, healthy)
        event = _event()

        # Act
        await bus.publish(event)

        # Assert
        assert calls == [event.user_id]
        assert unit_of_work.rolled_back == 1
        assert unit_of_work.committed == 1

    @pytest.mark.asyncio
    async def test_event_without_handlers_is_ignored(self):
        bus = EventBus(RecordingUnitOfWork())

        await bus.publish(_event())

        assert bus.handlers_for(ProfileFieldChanged) == []

    @pytest.mark.asyncio
    async def test_deferred_events_wait_for_flush(self):
        """Deferred events reach handlers only on flush, in queue order."""
        # Arrange
        bus = EventBus(RecordingUnitOfWork())
        delivered = []

        async def record(event):
            delivered.append(event)

        bus.subscribe(ProfileFieldChanged, record)
        first, second = _event(), _event()

        # Act
        bus.defer(first)
        bus.defer(second)
        delivered_before_flush = list(delivered)
        await bus.flush()

        # Assert
        assert delivered_before_flush == []
        assert delivered == [first, second]
        assert bus.pending == []

    @pytest.mark.asyncio
    async def test_flush_survives_failing_handler(self):
        bus = EventBus(RecordingUnitOfWork())

        async def broken(event):
            raise RuntimeError("storage unavailable")

        bus.subscribe(ProfileFieldChanged, broken)
        bus.defer(_event())

        await bus.flush()

        assert bus.pending == []
