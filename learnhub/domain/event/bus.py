"""In-process event bus for best-effort side effects."""

from collections import defaultdict
from typing import Awaitable, Callable, TypeVar

import logfire

from learnhub.domain.event.events import DomainEvent
from learnhub.domain.repository import UnitOfWork

E = TypeVar("E", bound=DomainEvent)
Handler = Callable[[E], Awaitable[None]]


class EventBus:
    """Dispatches events to subscribed handlers, one at a time.

    Each handler runs in its own isolation scope. A handler that raises is
    rolled back on its own, logged and dropped; the remaining handlers
    still run and ``publish`` never raises. There are no retries.
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """Initialize event bus.

        Args:
            unit_of_work: Provides the per-handler isolation scope
        """
        self.unit_of_work = unit_of_work
        self._handlers: dict[type[DomainEvent], list[Handler]] = defaultdict(list)
        self._deferred: list[DomainEvent] = []

    def subscribe(self, event_type: type[E], handler: Handler[E]) -> None:
        """Register a handler for an event type.

        Args:
            event_type: Exact event class to handle
            handler: Async callable receiving the event
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[Handler]:
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every handler subscribed to its type.

        Args:
            event: The event to deliver
        """
        event_name = type(event).__name__
        for handler in self.handlers_for(type(event)):
            handler_name = getattr(handler, "__qualname__", repr(handler))
            with logfire.span(
                "event_bus.handle", event=event_name, handler=handler_name
            ):
                try:
                    async with self.unit_of_work.isolated():
                        await handler(event)
                except Exception as e:
                    logfire.error(
                        "Event handler failed",
                        event=event_name,
                        handler=handler_name,
                        error=str(e),
                    )

    def defer(self, event: DomainEvent) -> None:
        """Queue an event for ``flush``, after the response is sent.

        Used for work the caller should not wait for, such as rewriting
        identity stamps across every collection.
        """
        self._deferred.append(event)

    @property
    def pending(self) -> list[DomainEvent]:
        return list(self._deferred)

    async def flush(self) -> None:
        """Publish every deferred event, in the order they were queued."""
        while self._deferred:
            await self.publish(self._deferred.pop(0))
