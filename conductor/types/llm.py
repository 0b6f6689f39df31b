"""LLM provider types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, runtime_checkable

ResponseFormat = Literal["json_object", "text"]


@dataclass
class LLMOptions:
    temperature: float | None = None
    max_tokens: int | None = None
    model: str | None = None
    enable_function_calling: bool = False
    response_format: ResponseFormat | None = None
    system_prompt: str | None = None


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class LLMResponse:
    content: str
    usage: TokenUsage | None = None
    raw: Any = None


@dataclass
class FunctionCall:
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class LLMFunctionResponse(LLMResponse):
    function_call: FunctionCall | None = None


@dataclass
class LLMFunction:
    name: str
    description: str
    parameters: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )


@runtime_checkable
class LLMProvider(Protocol):
    async def complete(self, prompt: str, options: LLMOptions | None = None) -> LLMResponse: ...

    async def complete_with_functions(
        self,
        prompt: str,
        functions: list[LLMFunction],
        options: LLMOptions | None = None,
    ) -> LLMFunctionResponse: ...
