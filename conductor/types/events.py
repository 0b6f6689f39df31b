"""Event types emitted by agents, workflows, tools and memory stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union

from .agent import AgentResponse, AgentStep, utcnow


@dataclass
class StepEvent:
    source: str
    step: AgentStep
    type: str = "step"


@dataclass
class AgentCompleteEvent:
    agent: str
    result: AgentResponse
    type: str = "agent_complete"


@dataclass
class ErrorEvent:
    source: str
    error: Exception
    type: str = "error"


@dataclass
class RetryEvent:
    tool: str
    attempt: int
    error: Exception
    type: str = "retry"


@dataclass
class MemoryEvent:
    type: str  # memory:set | memory:get | memory:delete | memory:clear
    namespace: str
    key: str | None = None
    value: Any = None
    timestamp: datetime = field(default_factory=utcnow)


ConductorEvent = Union[StepEvent, AgentCompleteEvent, ErrorEvent, RetryEvent, MemoryEvent]
