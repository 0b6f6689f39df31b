"""Conversation context persisted through a MemoryStore."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..types import ContextData, ContextMessage
from .store import MemoryStore


@dataclass
class ContextSummary:
    message_count: int
    last_message_time: datetime | None
    metadata: dict[str, Any]


class ContextManager:
    def __init__(self, store: MemoryStore, context_id: str) -> None:
        self.store = store
        self.context_id = context_id
        self.context = ContextData()

    async def initialize(self) -> None:
        saved = await self.store.recall(self.context_id)
        if saved is not None:
            self.context = saved

    async def add_message(self, role: str, content: str) -> None:
        self.context.messages.append(ContextMessage(role=role, content=content))
        await self._save()

    async def update_metadata(self, metadata: dict[str, Any]) -> None:
        self.context.metadata.update(metadata)
        await self._save()

    async def set_state(self, key: str, value: Any) -> None:
        self.context.state[key] = value
        await self._save()

    async def get_state(self, key: str, default: Any = None) -> Any:
        return self.context.state.get(key, default)

    def get_recent_messages(self, count: int = 10) -> list[ContextMessage]:
        if count <= 0:
            return []
        return self.context.messages[-count:]

    async def summarize(self) -> ContextSummary:
        messages = self.context.messages
        return ContextSummary(
            message_count=len(messages),
            last_message_time=messages[-1].timestamp if messages else None,
            metadata=dict(self.context.metadata),
        )

    async def clear(self) -> None:
        self.context = ContextData()
        await self._save()

    async def _save(self) -> None:
        await self.store.remember(
            self.context_id, self.context, type="context", tags=["context", self.context_id],
        )
