"""Agent execution records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class StepType(str, Enum):
    TOOL = "tool"
    LLM = "llm"
    OBSERVATION = "observation"


class AgentStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AgentStep:
    type: StepType
    name: str
    input: Any = None
    output: Any = None
    error: Exception | None = None
    timestamp: datetime = field(default_factory=utcnow)
    duration: int = 0  # ms


@dataclass(frozen=True)
class ResponseMetrics:
    total_tokens: int = 0
    total_cost: float = 0.0
    duration: int = 0  # ms


@dataclass(frozen=True)
class AgentResponse:
    output: Any
    steps: tuple[AgentStep, ...] = ()
    metrics: ResponseMetrics = field(default_factory=ResponseMetrics)
