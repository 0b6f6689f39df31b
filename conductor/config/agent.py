"""
Agent, chain and workflow configuration.

Configs are built by the caller and treated as read-only by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..types import LLMProvider, Tool

DEFAULT_MAX_ITERATIONS = 1
DEFAULT_TIMEOUT_MS = 15000


@dataclass(frozen=True)
class AgentConfig:
    name: str
    llm_provider: LLMProvider
    tools: list[Tool] = field(default_factory=list)
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    # recorded for callers; the engine does not enforce it
    default_timeout: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")


@dataclass(frozen=True)
class ChainStep:
    """One stage of a chain. Set exactly one of ``tool`` or ``prompt``.

    ``tool`` is either the name of one of the chain's tools or a Tool object.
    """

    name: str
    tool: str | Tool | None = None
    prompt: str | None = None
    input: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChainConfig(AgentConfig):
    steps: list[ChainStep] = field(default_factory=list)


@dataclass(frozen=True)
class WorkflowEdge:
    source: str
    target: str
    condition: Any = None  # accepted but never evaluated

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkflowEdge:
        return cls(source=data["from"], target=data["to"], condition=data.get("condition"))


@dataclass(frozen=True)
class WorkflowGraph:
    nodes: list[str] = field(default_factory=list)
    edges: list[WorkflowEdge] = field(default_factory=list)

    def incoming(self, node: str) -> list[WorkflowEdge]:
        return [e for e in self.edges if e.target == node]

    def outgoing(self, node: str) -> list[WorkflowEdge]:
        return [e for e in self.edges if e.source == node]


@dataclass(frozen=True)
class WorkflowConfig:
    name: str
    agents: list[AgentConfig] = field(default_factory=list)
    graph: WorkflowGraph = field(default_factory=WorkflowGraph)
