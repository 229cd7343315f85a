"""Simple synchronous in-process event emitter."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from emitter.keys import WILDCARD, EventType

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]
WildcardHandler = Callable[[EventType, Any], None]
AnyHandler = Handler | WildcardHandler
EventHandlerMap = dict[EventType, list[AnyHandler]]


class Emitter(Protocol):
    all: EventHandlerMap

    def on(self, type: EventType, handler: AnyHandler) -> None: ...

    def off(self, type: EventType, handler: AnyHandler | None = None) -> None: ...

    def emit(self, type: EventType, payload: Any = None) -> None: ...


class EventBus:
    """Publish/subscribe bus keyed by event type.

    Handlers are called synchronously in registration order. Handlers under
    ``WILDCARD`` receive ``(type, payload)`` and run after the type-matched
    ones. Exceptions raised by handlers are not caught.

    The registry is exposed as ``all``. A mapping passed in is used as is,
    so buses built from the same mapping share their subscriptions.
    """

    def __init__(self, all: EventHandlerMap | None = None) -> None:
        self.all: EventHandlerMap = {} if all is None else all

    def on(self, type: EventType, handler: AnyHandler) -> None:
        handlers = self.all.get(type)
        if handlers is not None:
            handlers.append(handler)
        else:
            self.all[type] = [handler]
        logger.debug("Subscribed %r to %r", handler, type)

    def off(self, type: EventType, handler: AnyHandler | None = None) -> None:
        """Remove the first occurrence of ``handler``, or every handler for ``type``.

        Unknown types and handlers are ignored. Clearing keeps the key with an
        empty list.
        """
        handlers = self.all.get(type)
        if handlers is None:
            return
        if handler is None:
            self.all[type] = []
            logger.debug("Cleared handlers for %r", type)
            return
        index = next((i for i, h in enumerate(handlers) if h is handler), None)
        if index is None:
            # Bound methods are recreated on each attribute access, so fall
            # back to equality only when no identical handler is registered.
            index = next((i for i, h in enumerate(handlers) if h == handler), None)
        if index is None:
            return
        del handlers[index]
        logger.debug("Unsubscribed %r from %r", handler, type)

    def emit(self, type: EventType, payload: Any = None) -> None:
        # Snapshot both lists so handlers may subscribe/unsubscribe while
        # dispatch is in progress; changes apply to the next emit.
        if type != WILDCARD:
            handlers = list(self.all.get(type) or ())
            logger.debug("Emitting %r to %d handler(s)", type, len(handlers))
            for handler in handlers:
                handler(payload)

        wildcard_handlers = list(self.all.get(WILDCARD) or ())
        for handler in wildcard_handlers:
            handler(type, payload)

    def publish(self, event: Any) -> None:
        """Emit ``event`` under its own class."""
        self.emit(type(event), event)


def mitt(all: EventHandlerMap | None = None) -> EventBus:
    """Create an emitter, optionally over an existing handler registry."""
    return EventBus(all)
