"""Namespaced key/value memory on top of a StoreProvider."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..events import EventBus
from ..types import MemoryEvent, MemoryItem, MemoryMetadata, StoreProvider

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600  # seconds


class MemoryStore:
    """Emits ``memory:set``, ``memory:get``, ``memory:delete`` and ``memory:clear``."""

    def __init__(
        self,
        provider: StoreProvider,
        namespace: str = "default",
        default_ttl: float | None = DEFAULT_TTL,
        event_bus: EventBus | None = None,
    ) -> None:
        self.provider = provider
        self.namespace = namespace
        self.default_ttl = default_ttl
        self.event_bus = event_bus or EventBus(node_id=f"memory:{namespace}")

    def on(self, event_type: str, handler: Callable) -> None:
        if event_type.endswith(":*"):
            self.event_bus.on_pattern(event_type, handler)
        else:
            self.event_bus.on(event_type, handler)

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def remember(
        self,
        key: str,
        value: Any,
        type: str = "generic",
        ttl: float | None = None,
        tags: list[str] | None = None,
    ) -> None:
        item = MemoryItem(
            id=key,
            content=value,
            metadata=MemoryMetadata(
                type=type,
                ttl=ttl if ttl is not None else self.default_ttl,
                tags=list(tags or []),
            ),
        )
        await self.provider.set(self._key(key), item)
        await self.event_bus.emit(MemoryEvent(type="memory:set", namespace=self.namespace, key=key, value=item))

    async def recall(self, key: str) -> Any:
        item = await self.provider.get(self._key(key))
        if item is None:
            return None
        await self.event_bus.emit(MemoryEvent(type="memory:get", namespace=self.namespace, key=key, value=item))
        return item.content

    async def forget(self, key: str) -> None:
        await self.provider.delete(self._key(key))
        await self.event_bus.emit(MemoryEvent(type="memory:delete", namespace=self.namespace, key=key))

    async def search_by_type(self, type: str) -> list[Any]:
        return [item.content for item in await self.provider.search(type=type)]

    async def search_by_tags(self, tags: list[str]) -> list[Any]:
        return [item.content for item in await self.provider.search(tags=tags)]

    async def clear(self) -> None:
        await self.provider.clear()
        logger.debug("Cleared memory provider for namespace %s", self.namespace)
        await self.event_bus.emit(MemoryEvent(type="memory:clear", namespace=self.namespace))
