"""
Pytest Configuration and Fixtures
"""

import json
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from conductor.llm import ScriptedLLMProvider
from conductor.types import LLMResponse


class StubTool:
    """Minimal Tool: a name, a description and an AsyncMock execute."""

    def __init__(self, name: str, return_value: Any = None, side_effect: Any = None, description: str = ""):
        self.name = name
        self.description = description or f"{name} tool"
        self.execute = AsyncMock(return_value=return_value, side_effect=side_effect)


@pytest.fixture
def make_tool() -> Callable[..., StubTool]:
    """Factory for stub tools."""
    return StubTool


@pytest.fixture
def scripted_provider() -> Callable[..., ScriptedLLMProvider]:
    """Factory for a ScriptedLLMProvider with queued responses."""
    return ScriptedLLMProvider


@pytest.fixture
def mock_provider() -> AsyncMock:
    """An AsyncMock LLM provider whose complete() picks no particular tool."""
    provider = AsyncMock()
    provider.complete.return_value = LLMResponse(content=json.dumps({"tool": "noop", "action": None}))
    return provider


@pytest.fixture
def no_sleep(monkeypatch) -> AsyncMock:
    """Replace asyncio.sleep so backoff delays are recorded, not waited."""
    sleep = AsyncMock()
    monkeypatch.setattr("asyncio.sleep", sleep)
    return sleep
