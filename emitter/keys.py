"""Event keys: plain hashable values, symbol-like tokens and the wildcard."""

from __future__ import annotations

from collections.abc import Hashable

EventType = Hashable

# Handlers registered under this key receive every emitted event.
WILDCARD = "*"


class Symbol:
    """A unique event key that never collides with any other key.

    Two symbols are distinct even when they share a description.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"
