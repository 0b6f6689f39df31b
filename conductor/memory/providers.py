"""Store providers."""

from __future__ import annotations

from datetime import datetime, timedelta

from ..types import MemoryItem
from ..types.agent import utcnow


def is_expired(item: MemoryItem, now: datetime | None = None) -> bool:
    ttl = item.metadata.ttl
    if not ttl:
        return False
    return (now or utcnow()) > item.metadata.timestamp + timedelta(seconds=ttl)


def matches(
    item: MemoryItem,
    type: str | None = None,
    tags: list[str] | None = None,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
) -> bool:
    meta = item.metadata
    if type and meta.type != type:
        return False
    if tags and not all(tag in meta.tags for tag in tags):
        return False
    if from_date and meta.timestamp < from_date:
        return False
    if to_date and meta.timestamp > to_date:
        return False
    return True


class InMemoryStore:
    """Dict-backed provider. Expired items vanish on read and are skipped by search."""

    def __init__(self) -> None:
        self._items: dict[str, MemoryItem] = {}

    async def get(self, key: str) -> MemoryItem | None:
        item = self._items.get(key)
        if item is None:
            return None
        if is_expired(item):
            await self.delete(key)
            return None
        return item

    async def set(self, key: str, item: MemoryItem) -> None:
        self._items[key] = item

    async def delete(self, key: str) -> None:
        self._items.pop(key, None)

    async def clear(self) -> None:
        self._items.clear()

    async def search(
        self,
        type: str | None = None,
        tags: list[str] | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[MemoryItem]:
        now = utcnow()
        return [
            item for item in self._items.values()
            if matches(item, type, tags, from_date, to_date) and not is_expired(item, now)
        ]

    def __len__(self) -> int:
        return len(self._items)
