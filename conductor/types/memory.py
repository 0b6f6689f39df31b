"""Memory store types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from .agent import utcnow


@dataclass
class MemoryMetadata:
    type: str = "generic"
    timestamp: datetime = field(default_factory=utcnow)
    ttl: float | None = None  # seconds
    tags: list[str] = field(default_factory=list)


@dataclass
class MemoryItem:
    id: str
    content: Any
    metadata: MemoryMetadata = field(default_factory=MemoryMetadata)


@runtime_checkable
class StoreProvider(Protocol):
    async def get(self, key: str) -> MemoryItem | None: ...
    async def set(self, key: str, item: MemoryItem) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def clear(self) -> None: ...

    async def search(
        self,
        type: str | None = None,
        tags: list[str] | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[MemoryItem]: ...


@dataclass
class ContextMessage:
    role: str
    content: str
    timestamp: datetime = field(default_factory=utcnow)


@dataclass
class ContextData:
    messages: list[ContextMessage] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)
