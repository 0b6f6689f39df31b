"""Event bus — publish/subscribe with exact, pattern and wildcard handlers."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Union

from ..types import ConductorEvent

logger = logging.getLogger(__name__)

Handler = Callable[[ConductorEvent], Union[Awaitable[None], None]]


class EventBus:
    """Observer registry. Handlers may be plain callables or coroutine functions.

    A failing handler is logged and never interrupts the emitter.
    """

    def __init__(self, node_id: str | None = None) -> None:
        self.node_id = node_id
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._wildcard: list[Handler] = []

    def on(self, event_type: str, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def on_pattern(self, pattern: str, handler: Handler) -> None:
        if not pattern.endswith(":*"):
            raise ValueError(f"Pattern must end with ':*', got {pattern!r}")
        self._handlers[pattern].append(handler)

    def on_all(self, handler: Handler) -> None:
        self._wildcard.append(handler)

    def off(self, event_type: str, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if event_type == "*" and handler in self._wildcard:
            self._wildcard.remove(handler)

    def listener_count(self, event_type: str) -> int:
        return len(self._handlers.get(event_type, [])) + len(self._wildcard)

    async def emit(self, event: ConductorEvent) -> None:
        event_type = getattr(event, "type", "")
        for h in self._handlers.get(event_type, []) + self._wildcard:
            await self._call(h, event, event_type)
        # 'memory:*' matches 'memory:set', etc.
        for pat, handlers in list(self._handlers.items()):
            if not pat.endswith(":*"):
                continue
            if event_type.startswith(pat[:-1]):
                for h in list(handlers):
                    await self._call(h, event, pat)

    @staticmethod
    async def _call(handler: Handler, event: Any, label: str) -> None:
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Event handler error for %s", label)
