"""
Scripted LLM provider for tests and demos.

Replays queued responses in order and records every prompt it receives.
No network access, no API key.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any, Iterable, Union

from ..types import FunctionCall, LLMFunction, LLMFunctionResponse, LLMOptions, LLMResponse, TokenUsage

Scripted = Union[str, dict, LLMResponse, Exception]


class ScriptedLLMProvider:
    """
    Usage:
        provider = ScriptedLLMProvider([{"tool": "echo", "action": {"x": 1}}])
        response = await provider.complete("pick a tool")

    dict entries are JSON-encoded, exceptions are raised when reached. Once
    the script runs out, ``fallback`` (if given) is returned for every call.
    """

    def __init__(self, responses: Iterable[Scripted] = (), fallback: str | None = None) -> None:
        self._queue: deque[Scripted] = deque(responses)
        self.fallback = fallback
        self.prompts: list[str] = []
        self.options: list[LLMOptions | None] = []

    def add_response(self, response: Scripted) -> None:
        self._queue.append(response)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    async def complete(self, prompt: str, options: LLMOptions | None = None) -> LLMResponse:
        self.prompts.append(prompt)
        self.options.append(options)
        return self._next()

    async def complete_with_functions(
        self,
        prompt: str,
        functions: list[LLMFunction],
        options: LLMOptions | None = None,
    ) -> LLMFunctionResponse:
        response = await self.complete(prompt, options)
        call = _function_call(response.content, {f.name for f in functions})
        return LLMFunctionResponse(content=response.content, usage=response.usage, raw=response.raw, function_call=call)

    def _next(self) -> LLMResponse:
        if not self._queue:
            if self.fallback is None:
                raise RuntimeError("ScriptedLLMProvider has no responses left")
            return _as_response(self.fallback)
        item = self._queue.popleft()
        if isinstance(item, Exception):
            raise item
        return _as_response(item)


def _as_response(item: Any) -> LLMResponse:
    if isinstance(item, LLMResponse):
        return item
    content = item if isinstance(item, str) else json.dumps(item)
    words = len(content.split())
    return LLMResponse(content=content, usage=TokenUsage(completion_tokens=words, total_tokens=words))


def _function_call(content: str, names: set[str]) -> FunctionCall | None:
    """Content shaped like ``{"name": ..., "arguments": {...}}`` naming a known function."""
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("name") in names:
        return FunctionCall(name=data["name"], arguments=dict(data.get("arguments") or {}))
    return None
