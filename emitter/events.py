"""Typed domain events published through the bus by class."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainEvent(BaseModel):
    """Base class for event payloads keyed by their own class.

    Subscribe with ``bus.on(MyEvent, handler)`` and fire with
    ``bus.publish(MyEvent(...))``.
    """

    model_config = ConfigDict(frozen=True)


def event_name(event: DomainEvent | type[DomainEvent]) -> str:
    cls = event if isinstance(event, type) else type(event)
    return cls.__name__
